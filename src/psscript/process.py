"""Spawning PowerShell and exchanging data with it."""

import logging
import os
import subprocess
from collections.abc import Sequence

from psscript.errors import PsIoError, ScriptEncodingError

log = logging.getLogger(__name__)

# Windows creation flag fallback (defined manually for type-checkers/Unix).
_CREATE_NO_WINDOW = 0x08000000


def creation_flags(hidden: bool) -> int:
    """Return the process creation flags for the requested window visibility."""
    if not hidden or os.name != "nt":
        return 0
    return getattr(subprocess, "CREATE_NO_WINDOW", _CREATE_NO_WINDOW)


def script_input(script: str) -> bytes:
    """Return the bytes written to PowerShell's stdin: one line per statement."""
    text = "".join(f"{line}\n" for line in script.splitlines())
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ScriptEncodingError(f"script cannot be encoded as UTF-8: {e}") from e


def spawn(executable: str, args: Sequence[str], hidden: bool) -> subprocess.Popen:
    """Start PowerShell with piped stdin, stdout and stderr."""
    cmd = [executable, *args]
    log.debug("spawning %s", cmd)
    try:
        return subprocess.Popen(
            cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            creationflags=creation_flags(hidden),
        )
    except OSError as e:
        raise PsIoError(f"failed to start {executable}: {e}") from e


def communicate(proc: subprocess.Popen, data: bytes) -> tuple[int, bytes, bytes]:
    """Write data to stdin, wait for exit and return (returncode, stdout, stderr)."""
    try:
        stdout, stderr = proc.communicate(data)
    except OSError as e:
        proc.kill()
        proc.wait()
        raise PsIoError(f"failed to communicate with PowerShell: {e}") from e
    log.debug("PowerShell exited with code %d", proc.returncode)
    return proc.returncode, stdout or b"", stderr or b""
