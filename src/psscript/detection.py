"""PowerShell executable detection."""

import logging
import os
import shutil

from psscript.errors import PowershellNotFoundError

log = logging.getLogger(__name__)

POWERSHELL_ENV_VAR = "PSSCRIPT_POWERSHELL"


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def _powershell_candidates(executable: str | None = None) -> list[str]:
    """Return PowerShell candidates in preference order."""
    candidates: list[str] = []
    if executable and executable.strip():
        candidates.append(executable.strip())

    override = os.environ.get(POWERSHELL_ENV_VAR, "").strip()
    if override:
        candidates.append(override)

    # Windows PowerShell ships with the OS; pwsh is the cross-platform build.
    if os.name == "nt":
        candidates.extend(["powershell", "pwsh"])
    else:
        candidates.extend(["pwsh", "powershell"])

    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        deduped.append(item)
    return deduped


def find_powershell(executable: str | None = None) -> str:
    """Return the path of the PowerShell executable to launch.

    An explicit ``executable`` wins, then the ``PSSCRIPT_POWERSHELL``
    environment variable, then the platform defaults.
    """
    explicit = executable.strip() if executable else ""
    candidates = _powershell_candidates(executable)
    for candidate in candidates:
        resolved = _resolve_executable(candidate)
        if resolved:
            log.debug("using PowerShell at %s", resolved)
            return resolved
        if explicit and candidate == explicit:
            log.warning("PowerShell executable %s not found, falling back", candidate)
        else:
            log.debug("PowerShell candidate %s not found", candidate)
    raise PowershellNotFoundError(
        "No PowerShell executable found (tried: "
        + ", ".join(candidates)
        + f"). Install PowerShell or set {POWERSHELL_ENV_VAR}."
    )
