"""Result model for a finished PowerShell run."""

from dataclasses import dataclass


def _decode(data: bytes) -> str | None:
    if not data:
        return None
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Output:
    """Exit status and captured streams of a PowerShell process."""

    success: bool
    returncode: int
    stdout_bytes: bytes = b""
    stderr_bytes: bytes = b""

    def stdout(self) -> str | None:
        """Return decoded stdout, or None when nothing was written."""
        return _decode(self.stdout_bytes)

    def stderr(self) -> str | None:
        """Return decoded stderr, or None when nothing was written."""
        return _decode(self.stderr_bytes)

    def stdout_lines(self) -> list[str]:
        """Return stdout split into lines, empty when nothing was written."""
        text = self.stdout()
        return text.splitlines() if text else []

    def __str__(self) -> str:
        return self.stdout() or self.stderr() or ""
