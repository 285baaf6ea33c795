"""Invocation descriptor for a configured PowerShell run."""

import logging
from dataclasses import dataclass

from psscript.detection import find_powershell
from psscript.errors import PowershellError
from psscript.models import Output
from psscript.process import communicate, script_input, spawn

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PsScript:
    """Ready-to-run PowerShell arguments plus window and echo hints.

    Instances come from ``PsScriptBuilder.build()``.
    """

    args: tuple[str, ...]
    hidden: bool
    print_commands: bool

    def run(self, script: str, executable: str | None = None) -> Output:
        """Run script through PowerShell and return its output.

        Raises PowershellError when PowerShell exits non-zero, and
        PowershellNotFoundError / PsIoError when it cannot be started.
        ScriptEncodingError is raised before anything is spawned.
        """
        data = script_input(script)
        powershell = find_powershell(executable)
        proc = spawn(powershell, self.args, self.hidden)

        if self.print_commands:
            for line in script.splitlines():
                print(line, flush=True)

        returncode, stdout, stderr = communicate(proc, data)
        output = Output(
            success=returncode == 0,
            returncode=returncode,
            stdout_bytes=stdout,
            stderr_bytes=stderr,
        )
        if not output.success:
            log.debug("script failed: %s", output.stderr())
            raise PowershellError(output)
        return output
