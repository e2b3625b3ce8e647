"""Preflight - runs the configured checks under one calling convention."""

import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

from .checks import (
    check_gcloud_project,
    check_git_config,
    check_git_local_auth,
    check_installed,
)
from .config import Settings
from .models import CheckResult
from .output import failure, warn
from .runner import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)

Check = Callable[[], Awaitable[CheckResult]]


def resolved(fn: Callable[[], CheckResult]) -> Check:
    """Wrap a synchronous check as a coroutine that resolves immediately."""
    async def check() -> CheckResult:
        return fn()
    return check


class Preflight:
    """Sequence of named checks evaluated in order."""

    def __init__(self, checks: Optional[list[tuple[str, Check]]] = None):
        self.checks = list(checks or [])

    @classmethod
    def from_settings(
        cls, settings: Settings, runner: Optional[CommandRunner] = None
    ) -> "Preflight":
        """Build the check sequence a Settings object asks for."""
        runner = runner or SubprocessRunner()
        preflight = cls()
        preflight.add("installed", lambda: check_installed(settings.commands, runner))
        if settings.gcloud:
            preflight.add("gcloud", lambda: check_gcloud_project(runner))
        if settings.git_config:
            preflight.add("git-config", lambda: check_git_config(runner))
        if settings.git_auth:
            preflight.add("git-auth", lambda: check_git_local_auth(settings.home))
        return preflight

    def add(self, name: str, fn: Callable[[], CheckResult]) -> None:
        """Append a synchronous check."""
        self.checks.append((name, resolved(fn)))

    def add_async(self, name: str, check: Check) -> None:
        """Append a check that is already a coroutine function."""
        self.checks.append((name, check))

    async def run(self) -> list[CheckResult]:
        """Evaluate checks one at a time, stopping at the first unmet one."""
        results = []
        for name, check in self.checks:
            logger.debug(f"Running check: {name}")
            result = await check()
            results.append(result)
            if not result.ok:
                logger.info(f"Check '{name}' unmet: {result.reason}")
                break
        return results

    def run_sync(self) -> list[CheckResult]:
        """Run from synchronous code."""
        return asyncio.run(self.run())


def report(result: CheckResult) -> None:
    """Print an unmet result's failure line and hints."""
    print(failure(result.reason))
    for hint in result.hints:
        print(warn(hint))


def require(result: CheckResult) -> None:
    """Return if the result is ready, otherwise report it and exit 1."""
    if result.ok:
        return
    report(result)
    sys.exit(1)
