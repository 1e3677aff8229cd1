"""ANSI text utilities - measuring and padding strings with escape codes.

Widths are terminal cells, so wide characters (CJK, most emoji) count
as two.
"""

from __future__ import annotations

import re

from rich.cells import cell_len

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    """Remove ANSI escape codes from a string."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible width of string in cells (excluding ANSI escape codes)."""
    return cell_len(strip_ansi(s))


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width visible cells."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)
