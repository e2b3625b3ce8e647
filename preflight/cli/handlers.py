"""Command handlers for preflight CLI."""

import asyncio
import sys

from .. import __version__
from ..checks import (
    check_file_exists,
    check_gcloud_project,
    check_git_config,
    check_git_local_auth,
    check_installed,
    check_local_dir,
)
from ..errors import DirectoryNotEmpty, PrerequisitesUnmet
from ..orchestrator import Preflight
from ..output import log_step, log_success


COMMANDS = {}


def command(name, settings=False):
    """Register a command, noting whether it needs loaded settings."""
    def decorator(fn):
        COMMANDS[name] = (fn, settings)
        return fn
    return decorator


def _raise_unmet(result):
    if not result.ok:
        raise PrerequisitesUnmet(result)


@command("version")
def cmd_version(args, settings):
    print(f"preflight {__version__}")


@command("check", settings=True)
def cmd_check(args, settings):
    log_step("Checking prerequisites...")
    results = Preflight.from_settings(settings).run_sync()
    for result in results:
        _raise_unmet(result)
    log_success("All prerequisites met")


@command("installed", settings=True)
def cmd_installed(args, settings):
    _raise_unmet(check_installed(args.names or settings.commands))


@command("gcloud")
def cmd_gcloud(args, settings):
    _raise_unmet(check_gcloud_project())


@command("git-config")
def cmd_git_config(args, settings):
    _raise_unmet(check_git_config())


@command("git-auth", settings=True)
def cmd_git_auth(args, settings):
    _raise_unmet(check_git_local_auth(settings.home))


# --- Filesystem gates: exit status only, no message ---

@command("file-exists")
def cmd_file_exists(args, settings):
    sys.exit(0 if check_file_exists(args.path) else 1)


@command("empty-dir")
def cmd_empty_dir(args, settings):
    try:
        asyncio.run(check_local_dir(args.path))
    except DirectoryNotEmpty:
        sys.exit(1)
