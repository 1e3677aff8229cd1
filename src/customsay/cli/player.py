"""Play rendered scenes as an in-place terminal animation."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence

from customsay.cli.terminal import Terminal
from customsay.logging import get_logger

log = get_logger("player")


class Player:
    """
    Redraw scenes over each other to animate a character.

    Every scene must have the same number of lines; the cursor is
    moved back up by that many lines before each redraw.
    """

    def __init__(
        self,
        terminal: Terminal | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.terminal = terminal or Terminal()
        self._sleep = sleep

    def play(self, scenes: Sequence[str], delay: float, loops: int = 1) -> int:
        """
        Play scenes ``loops`` times with ``delay`` seconds between frames.

        When output is not a terminal, only the first scene is written.

        Returns:
            Number of frames drawn
        """
        if not scenes:
            return 0

        if not self.terminal.is_tty():
            log.debug("Output is not a terminal, writing a single frame")
            self.terminal.write(scenes[0] + "\n")
            return 1

        height = max(scene.count("\n") + 1 for scene in scenes)
        drawn = 0
        with self.terminal.hidden_cursor():
            for _ in range(loops):
                for scene in scenes:
                    if drawn:
                        self.terminal.cursor_up(height)
                    self._draw(scene)
                    drawn += 1
                    self._sleep(delay)

        log.debug(f"Played {drawn} frame(s) over {loops} loop(s)")
        return drawn

    def _draw(self, scene: str) -> None:
        for line in scene.split("\n"):
            self.terminal.clear_line()
            self.terminal.write(line + "\n")
