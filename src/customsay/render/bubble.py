"""Render text inside a cowsay-style speech bubble."""

from rich.cells import chop_cells

from customsay.core.ansi_text import pad_to_width, visible_len


class BubbleRenderer:
    """
    Wrap text and draw a speech bubble around it.

    A single line gets ``< text >`` sides; multiple lines get
    ``/ \\``, ``| |`` and ``\\ /`` sides, like cowsay. All widths are
    terminal cells.
    """

    def __init__(self, width: int = 40, tab_size: int = 4):
        if width < 1:
            raise ValueError(f"Bubble width must be at least 1, got {width}")
        self.width = width
        self.tab_size = tab_size

    def wrap(self, text: str) -> list[str]:
        """Split text into lines no wider than the bubble width."""
        lines: list[str] = []
        for paragraph in text.expandtabs(self.tab_size).splitlines() or [""]:
            lines.extend(self._wrap_paragraph(paragraph.rstrip()))
        return lines

    def _wrap_paragraph(self, paragraph: str) -> list[str]:
        if visible_len(paragraph) <= self.width:
            return [paragraph]

        lines: list[str] = []
        current = ""
        for word in paragraph.split():
            # Words wider than the bubble are cut at cell boundaries
            pieces = chop_cells(word, self.width) if visible_len(word) > self.width else [word]
            for piece in pieces:
                if not current:
                    current = piece
                elif visible_len(current) + 1 + visible_len(piece) <= self.width:
                    current += " " + piece
                else:
                    lines.append(current)
                    current = piece
        if current:
            lines.append(current)
        return lines or [""]

    def render(self, text: str) -> list[str]:
        """Render text to bubble lines."""
        lines = self.wrap(text)
        inner = max(visible_len(line) for line in lines)

        result = [" " + "_" * (inner + 2)]
        if len(lines) == 1:
            result.append(f"< {pad_to_width(lines[0], inner)} >")
        else:
            last = len(lines) - 1
            for i, line in enumerate(lines):
                if i == 0:
                    left, right = "/", "\\"
                elif i == last:
                    left, right = "\\", "/"
                else:
                    left, right = "|", "|"
                result.append(f"{left} {pad_to_width(line, inner)} {right}")
        result.append(" " + "-" * (inner + 2))
        return result
