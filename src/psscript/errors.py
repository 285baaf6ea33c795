"""Errors raised while running PowerShell scripts."""

from psscript.models import Output


class PsError(Exception):
    """Base class for psscript failures."""


class PowershellError(PsError):
    """PowerShell ran but exited with a non-zero status."""

    def __init__(self, output: Output) -> None:
        self.output = output
        detail = (output.stderr() or output.stdout() or "").strip()
        message = f"PowerShell exited with code {output.returncode}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class PowershellNotFoundError(PsError):
    """No PowerShell executable could be located."""


class PsIoError(PsError):
    """Starting PowerShell or exchanging data with it failed."""


class ScriptEncodingError(PsError):
    """The script text cannot be sent to PowerShell as UTF-8."""
