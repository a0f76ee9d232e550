"""Coloured error output."""

from __future__ import annotations

import sys
from typing import TextIO

RED = "\033[31m"
RESET = "\033[0m"


def format_error(message: str, *args: object) -> str:
    """Return the message, formatted with args if given, wrapped in red."""
    text = message % args if args else message
    return f"{RED}{text}{RESET}"


def error(message: str, *args: object, stream: TextIO | None = None) -> None:
    """Write a red error message to stream (standard error by default)."""
    target = sys.stderr if stream is None else stream
    target.write(format_error(message, *args))
    target.flush()