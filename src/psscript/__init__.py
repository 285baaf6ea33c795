"""Build and run PowerShell scripts from Python."""

__version__ = "0.1.0"

from psscript.builder import PsScriptBuilder
from psscript.errors import (
    PowershellError,
    PowershellNotFoundError,
    PsError,
    PsIoError,
    ScriptEncodingError,
)
from psscript.models import ExecutionPolicy, Output, PsScriptConfig
from psscript.psscript import run
from psscript.script import PsScript

__all__ = [
    "ExecutionPolicy",
    "Output",
    "PowershellError",
    "PowershellNotFoundError",
    "PsError",
    "PsIoError",
    "PsScript",
    "PsScriptBuilder",
    "PsScriptConfig",
    "ScriptEncodingError",
    "__version__",
    "run",
]
