"""PowerShell execution policy model."""

from enum import Enum


class ExecutionPolicy(str, Enum):
    """Security level PowerShell applies to running scripts.

    Each value is the exact token passed after ``-ExecutionPolicy``. See
    https://learn.microsoft.com/en-us/powershell/module/microsoft.powershell.core/about/about_execution_policies
    """

    ALL_SIGNED = "AllSigned"
    BYPASS = "Bypass"
    DEFAULT = "Default"
    REMOTE_SIGNED = "RemoteSigned"
    RESTRICTED = "Restricted"
    UNDEFINED = "Undefined"
    UNRESTRICTED = "Unrestricted"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for policy in cls:
                if policy.value.lower() == lowered:
                    return policy
        return None

    def __str__(self) -> str:
        return self.value
