"""Compose a speech bubble and a character frame into one scene."""

from collections.abc import Sequence

from customsay.core.character import Character
from customsay.core.constants import BUBBLE_TAIL, ESC, RESET
from customsay.render.bubble import BubbleRenderer


class SceneRenderer:
    """
    Render a character frame, optionally speaking through a bubble.

    Scene layout, top to bottom: bubble, tail, character frame.
    Without text only the frame is drawn.
    """

    def __init__(self, bubble_width: int = 40, tail: Sequence[str] = BUBBLE_TAIL):
        self.bubble = BubbleRenderer(width=bubble_width)
        self.tail = tuple(tail)

    def render_lines(
        self,
        frame: Sequence[str],
        text: str | None = None,
        height: int | None = None,
    ) -> list[str]:
        """Render a scene to lines, padding the frame above to ``height``."""
        lines: list[str] = []
        if text is not None:
            lines.extend(self.bubble.render(text))
            lines.extend(self.tail)

        if height is not None and len(frame) < height:
            lines.extend([""] * (height - len(frame)))

        for line in frame:
            # Stop colors bleeding into the next line
            if ESC in line and not line.endswith(RESET):
                line += RESET
            lines.append(line)
        return lines

    def render(self, frame: Sequence[str], text: str | None = None) -> str:
        """Render a scene to a printable string."""
        return "\n".join(self.render_lines(frame, text))

    def render_all(self, character: Character, text: str | None = None) -> list[str]:
        """
        Render one scene per character frame.

        All scenes have the same number of lines so an animation can
        redraw them in place.
        """
        height = character.height
        return [
            "\n".join(self.render_lines(frame, text, height=height))
            for frame in character.frames
        ]
