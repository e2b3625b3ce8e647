"""Exception hierarchy for preflight."""

from .models import CheckResult


class PreflightError(Exception):
    """Base exception for preflight errors."""


class ConfigError(PreflightError):
    """Configuration error."""


class DirectoryNotEmpty(PreflightError):
    """Directory is not empty or could not be listed."""


class PrerequisitesUnmet(PreflightError):
    """A prerequisite check did not pass."""

    def __init__(self, result: CheckResult):
        self.result = result
        super().__init__(result.reason)
