"""Shared utilities: colors and stderr status logging."""

import os
import sys

COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}

NO_COLOR = os.environ.get("NO_COLOR") is not None
DEBUG = os.environ.get("CAMELLINT_DEBUG", "") not in ("", "0")


def c(text: str, color: str) -> str:
    if NO_COLOR or not sys.stderr.isatty():
        return str(text)
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def log(msg: str):
    """Print a dim status message to stderr."""
    print(c(msg, "dim"), file=sys.stderr)


def debug(msg: str):
    """Like log(), but only when CAMELLINT_DEBUG is set."""
    if DEBUG:
        log(f"[camellint] {msg}")
