"""Small helpers for argument handling and storage location."""

from __future__ import annotations

import os
import string
import sys
from pathlib import Path

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lower(s: str | None) -> str | None:
    """Lower-case the ASCII letters of s; None passes through."""
    if s is None:
        return None
    return s.translate(_ASCII_LOWER)


def get_storage_path(filename: str, base_dir: str | os.PathLike[str] | None = None) -> Path:
    """Return the path of filename inside the .cg directory next to the program."""
    if base_dir is None:
        base_dir = Path(sys.argv[0] or sys.executable).resolve().parent
    return Path(base_dir) / ".cg" / filename


def file_exists(filename: str | os.PathLike[str]) -> bool:
    """Tell whether something exists at filename."""
    return os.path.exists(filename)