"""Model package for psscript."""

from psscript.models.execution_policy import ExecutionPolicy
from psscript.models.output import Output
from psscript.models.psscript_config import PsScriptConfig

__all__ = [
    "ExecutionPolicy",
    "Output",
    "PsScriptConfig",
]
