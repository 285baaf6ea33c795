"""Core logic for psscript."""

from psscript.builder import PsScriptBuilder
from psscript.config import load_config
from psscript.models import Output, PsScriptConfig


def run(script: str, config: PsScriptConfig | None = None) -> Output:
    """Run script with the configured defaults.

    Loads the user config when none is given.
    """
    if config is None:
        config = load_config()
    return PsScriptBuilder.from_config(config).build().run(script, executable=config.executable)
