"""preflight - prerequisite checks run before a CLI session."""

__version__ = "0.1.0"

from .checks import (  # noqa: E402
    check_file_exists,
    check_gcloud_project,
    check_git_config,
    check_git_local_auth,
    check_installed,
    check_local_dir,
)
from .models import CheckResult, CheckStatus, CommandResult  # noqa: E402
from .orchestrator import Preflight, require  # noqa: E402
from .runner import CommandRunner, SubprocessRunner  # noqa: E402

__all__ = [
    "check_file_exists",
    "check_gcloud_project",
    "check_git_config",
    "check_git_local_auth",
    "check_installed",
    "check_local_dir",
    "CheckResult",
    "CheckStatus",
    "CommandResult",
    "Preflight",
    "require",
    "CommandRunner",
    "SubprocessRunner",
]
