"""Low-level terminal operations for in-place redraws."""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, TextIO


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """Terminal output abstraction over a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so test harnesses that swap sys.stdout are honored
        return self._stream if self._stream is not None else sys.stdout

    def is_tty(self) -> bool:
        """Check whether output goes to an interactive terminal."""
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
            return TerminalSize(size.lines, size.columns)
        except (AttributeError, OSError, ValueError):
            return TerminalSize(24, 80)

    def write(self, text: str) -> None:
        """Write text to terminal."""
        self.stream.write(text)
        self.stream.flush()

    def hide_cursor(self) -> None:
        """Hide the cursor."""
        self.write('\x1b[?25l')

    def show_cursor(self) -> None:
        """Show the cursor."""
        self.write('\x1b[?25h')

    def cursor_up(self, lines: int) -> None:
        """Move cursor up and to the first column."""
        if lines > 0:
            self.write(f'\x1b[{lines}F')

    def clear_line(self) -> None:
        """Clear the whole current line."""
        self.write('\x1b[2K')

    def reset(self) -> None:
        """Reset all terminal attributes."""
        self.write('\x1b[0m')

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block, always restoring it."""
        self.hide_cursor()
        try:
            yield
        finally:
            self.reset()
            self.show_cursor()
