"""Prerequisite checks.

Each identity/environment check returns a CheckResult instead of exiting, so
the caller decides how to stop. The file and directory checks are gates the
caller branches on: check_file_exists returns a bool and check_local_dir
raises DirectoryNotEmpty.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from .errors import DirectoryNotEmpty
from .models import CheckResult
from .output import var_fmt
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

VERSION_PROBE = "--version"
UNSET_MARKER = "(unset)"
GITCOOKIES = ".gitcookies"
CSR_DOMAIN = "source.developers.google.com"
CSR_AUTH_DOCS = (
    "https://cloud.google.com/source-repositories/docs/authentication"
    "#manually-generated-credentials"
)


def check_installed(
    commands: Sequence[str], runner: Optional[CommandRunner] = None
) -> CheckResult:
    """Probe each command with --version; report the ones that fail.

    A program whose --version probe exits non-zero looks the same as one that
    is not installed.
    """
    if not commands:
        return CheckResult.ready("installed")

    runner = runner or SubprocessRunner()
    missing = []
    for cmd in commands:
        if runner.run([cmd, VERSION_PROBE]).exit_code != 0:
            missing.append(cmd)

    if missing:
        logger.info(f"Missing prerequisites: {missing}")
        return CheckResult.unmet(
            "installed",
            f"Required pre-requisites not installed: {','.join(missing)}. Exiting...",
        )
    return CheckResult.ready("installed")


def check_gcloud_project(runner: Optional[CommandRunner] = None) -> CheckResult:
    """Check that gcloud has a project configured."""
    runner = runner or SubprocessRunner()
    result = runner.run(["gcloud", "config", "get-value", "project"])
    if result.exit_code != 0 or UNSET_MARKER in result.stderr:
        return CheckResult.unmet(
            "gcloud",
            "The gcloud command does not appear to be initialized fully: "
            "no project is configured. Exiting...",
            hints=[
                "To fully initialize gcloud: gcloud init",
                "To set a project: gcloud config set project [NAME]",
            ],
        )
    return CheckResult.ready("gcloud")


def check_git_config(runner: Optional[CommandRunner] = None) -> CheckResult:
    """Check that git has a user email and name, otherwise commits fail."""
    runner = runner or SubprocessRunner()
    result = runner.run(["git", "config", "--list"])
    if result.exit_code != 0 or "email" not in result.stdout or "name" not in result.stdout:
        return CheckResult.unmet(
            "git-config",
            "The git command does not appear to be initialized fully "
            "with a configured email and name. Exiting...",
            hints=[
                "To fully initialize git, configure name and email with:",
                "\t" + var_fmt('git config --global user.email "you@example.com"'),
                "\t" + var_fmt('git config --global user.name "Your Name"'),
            ],
        )
    return CheckResult.ready("git-config")


def check_git_local_auth(home: Optional[Path] = None) -> CheckResult:
    """Check ~/.gitcookies for Cloud Source Repositories credentials.

    A missing file, an unreadable file and a file without the
    source.developers.google.com entry all produce the same result.
    """
    path = (home or Path.home()) / GITCOOKIES
    unmet = CheckResult.unmet(
        "git-auth",
        "Authentication to Cloud Source Repositories through git is not "
        f"configured. Please configure it as defined in: {CSR_AUTH_DOCS}",
    )

    try:
        cookies = path.read_text(errors="replace")
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return unmet

    if CSR_DOMAIN not in cookies:
        return unmet
    return CheckResult.ready("git-auth")


def check_file_exists(path) -> bool:
    """Return True if the file can be read."""
    try:
        with open(path, "rb") as f:
            f.read(1)
    except OSError:
        return False
    return True


async def check_local_dir(path) -> None:
    """Succeed only if the directory exists and is empty.

    Raises:
        DirectoryNotEmpty: directory has entries or cannot be listed
    """
    try:
        entries = await asyncio.to_thread(os.listdir, path)
    except OSError as e:
        logger.debug(f"Could not list {path}: {e}")
        raise DirectoryNotEmpty(str(path)) from None

    if entries:
        raise DirectoryNotEmpty(str(path))
