"""Argument parsing for preflight CLI."""

import argparse

from .. import __version__


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    p = argparse.ArgumentParser(prog="preflight", description="Check prerequisites before running a tool")
    p.add_argument("--version", "-v", action="version", version=f"preflight {__version__}")
    p.add_argument("--config", "-c", metavar="FILE", help="Path to preflight.yaml")
    p.add_argument("--verbose", action="store_true", help="Log each probe")

    sub = p.add_subparsers(dest="command", metavar="<command>")

    sub.add_parser("version", help="Show version")
    sub.add_parser("check", help="Run every configured check")

    add = sub.add_parser("installed", help="Check that programs are installed")
    add.add_argument("names", nargs="*", metavar="NAME", help="Program names (default: from config)")

    sub.add_parser("gcloud", help="Check that gcloud has a project configured")
    sub.add_parser("git-config", help="Check that git user email and name are set")
    sub.add_parser("git-auth", help="Check ~/.gitcookies for Cloud Source Repositories")

    add = sub.add_parser("file-exists", help="Exit 0 if a file is readable")
    add.add_argument("path", help="File path")

    add = sub.add_parser("empty-dir", help="Exit 0 if a directory exists and is empty")
    add.add_argument("path", help="Directory path")

    args = p.parse_args(argv)
    args.parser = p
    return args
