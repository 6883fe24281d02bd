"""Display name helpers."""

from __future__ import annotations

import re

_UNSAFE_PATH_CHARS = re.compile(r"[^A-Za-z0-9_\-.]")


def safe_path_from_display_name(display_name: str) -> str:
    """Replace characters that are unsafe in a path or URL with ``_``."""
    return _UNSAFE_PATH_CHARS.sub("_", display_name)
