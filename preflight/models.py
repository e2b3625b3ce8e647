"""Result models for commands and checks."""

from enum import Enum
from typing import Sequence

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Result of running an external program."""
    exit_code: int
    stdout: str = ""
    stderr: str = ""


class CheckStatus(str, Enum):
    """Outcome of a prerequisite check."""
    READY = "ready"
    UNMET = "unmet"


class CheckResult(BaseModel):
    """Tagged result of a prerequisite check.

    READY carries nothing beyond the check name. UNMET carries the failure
    reason and any remediation hints to show the user.
    """
    name: str
    status: CheckStatus
    reason: str = ""
    hints: list[str] = []

    @classmethod
    def ready(cls, name: str) -> "CheckResult":
        return cls(name=name, status=CheckStatus.READY)

    @classmethod
    def unmet(cls, name: str, reason: str, hints: Sequence[str] = ()) -> "CheckResult":
        return cls(name=name, status=CheckStatus.UNMET, reason=reason, hints=list(hints))

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.READY
