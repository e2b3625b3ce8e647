"""Command-line interface for preflight."""

import logging
import sys

from ..config import Settings
from ..errors import PreflightError, PrerequisitesUnmet
from ..orchestrator import report
from ..output import die

from .args import parse_args
from .handlers import COMMANDS


def main(argv=None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    if not args.command:
        args.parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    handler, needs_settings = COMMANDS[args.command]
    try:
        settings = Settings.load(args.config) if needs_settings else None
        handler(args, settings)

    except PrerequisitesUnmet as e:
        report(e.result)
        sys.exit(1)
    except PreflightError as e:
        die(str(e))
