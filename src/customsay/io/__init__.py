"""Character file I/O."""

from customsay.io.reader import list_characters, load_character, parse_character, resolve_character

__all__ = ["load_character", "parse_character", "resolve_character", "list_characters"]
