"""Process launching for prerequisite probes."""

import logging
import subprocess
from typing import Protocol

from .models import CommandResult

logger = logging.getLogger(__name__)

# Exit code reported when a program cannot be launched at all
NOT_LAUNCHED = 127


class CommandRunner(Protocol):
    """Runs a program synchronously and captures its output."""

    def run(self, args: list[str]) -> CommandResult:
        ...


class SubprocessRunner:
    """CommandRunner backed by subprocess.run. No timeout."""

    def run(self, args: list[str]) -> CommandResult:
        logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.debug(f"Could not launch {args[0]}: {e}")
            return CommandResult(exit_code=NOT_LAUNCHED, stderr=str(e))

        logger.debug(f"{args[0]} exited with {result.returncode}")
        return CommandResult(
            exit_code=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
