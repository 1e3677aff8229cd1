"""Character - the art a scene is built around."""

from dataclasses import dataclass

from customsay.core.ansi_text import visible_len


@dataclass(frozen=True)
class Character:
    """
    A named piece of ASCII art with one or more frames.

    Each frame is a tuple of lines. Lines may carry ANSI SGR color
    codes; measurements only count visible characters.
    """
    name: str
    frames: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError(f"Character {self.name!r} has no frames")

    @property
    def width(self) -> int:
        """Widest visible line across all frames."""
        return max(
            (visible_len(line) for frame in self.frames for line in frame),
            default=0,
        )

    @property
    def height(self) -> int:
        """Tallest frame, in lines."""
        return max(len(frame) for frame in self.frames)

    @property
    def is_animated(self) -> bool:
        return len(self.frames) > 1

    def frame(self, index: int) -> tuple[str, ...]:
        """Get a frame, wrapping around past the last one."""
        return self.frames[index % len(self.frames)]
