"""Configuration model for psscript."""

from pydantic import BaseModel

from psscript.models.execution_policy import ExecutionPolicy


class PsScriptConfig(BaseModel):
    """Default builder options and interpreter location."""

    executable: str | None = None
    no_profile: bool = True
    non_interactive: bool = True
    hidden: bool = True
    print_commands: bool = False
    execution_policy: ExecutionPolicy | None = None
