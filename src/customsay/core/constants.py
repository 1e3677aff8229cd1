"""Shared constants for character files and rendering."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Character files
FRAME_SEPARATOR = "%%"
CHARACTER_SUFFIXES = (".txt", ".art")

# Built-in character, used when none is configured
DEFAULT_CHARACTER_NAME = "cat"
DEFAULT_CHARACTER_FRAMES: tuple[tuple[str, ...], ...] = (
    (
        "  /\\_/\\",
        " ( o.o )",
        "  > ^ <",
        " /     \\",
        "(_|   |_)",
    ),
    (
        "  /\\_/\\",
        " ( -.- )",
        "  > ^ <",
        " /     \\",
        "(_|   |_)",
    ),
)

# Speech bubble tail, drawn between the bubble and the character
BUBBLE_TAIL = ("    \\", "     \\")
