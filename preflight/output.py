"""Terminal output formatting."""

import os
import sys

RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
CYAN = "\033[0;36m"
NC = "\033[0m"


def _paint(color: str, text: str) -> str:
    if os.environ.get("NO_COLOR"):
        return text
    return f"{color}{text}{NC}"


def failure(text: str) -> str:
    """Style text as a failure."""
    return _paint(RED, text)


def warn(text: str) -> str:
    """Style text as a warning."""
    return _paint(YELLOW, text)


def var_fmt(text: str) -> str:
    """Highlight a literal command or variable."""
    return _paint(CYAN, text)


def log_step(msg: str) -> None:
    """Log a step in progress."""
    print(_paint(YELLOW, f"-> {msg}"))


def log_success(msg: str) -> None:
    """Log a successful operation."""
    print(_paint(GREEN, f"OK {msg}"))


def log_error(msg: str) -> None:
    """Log an error to stderr."""
    print(_paint(RED, f"ERROR: {msg}"), file=sys.stderr)


def die(msg: str) -> None:
    """Log error and exit."""
    log_error(msg)
    sys.exit(1)
