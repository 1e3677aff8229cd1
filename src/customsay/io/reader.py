"""Load character files."""

from pathlib import Path

from customsay.core.character import Character
from customsay.core.constants import (
    CHARACTER_SUFFIXES,
    DEFAULT_CHARACTER_FRAMES,
    DEFAULT_CHARACTER_NAME,
    FRAME_SEPARATOR,
)
from customsay.exceptions import CharacterFormatError, CharacterNotFoundError
from customsay.logging import get_logger

log = get_logger("reader")


def parse_character(text: str, name: str = "untitled") -> Character:
    """
    Parse character text into a Character.

    Frames are separated by a line holding only ``%%``. Blank lines
    around each frame are dropped and empty frames are skipped.
    """
    frames: list[tuple[str, ...]] = []
    current: list[str] = []

    for line in text.splitlines() + [FRAME_SEPARATOR]:
        if line.strip() == FRAME_SEPARATOR:
            frame = _trim_blank_lines(current)
            if frame:
                frames.append(tuple(frame))
            current = []
        else:
            current.append(line.rstrip())

    if not frames:
        raise CharacterFormatError(
            f"Character {name!r} has no frames",
            hint=f"Put the art in the file, separating frames with a '{FRAME_SEPARATOR}' line.",
        )
    return Character(name=name, frames=tuple(frames))


def _trim_blank_lines(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def load_character(path: str | Path) -> Character:
    """
    Load a character file from disk.

    The file must be UTF-8 text; the character is named after the
    file stem.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CharacterFormatError(
            f"Character file {path} is not valid UTF-8",
            hint="Re-save the file with UTF-8 encoding.",
        ) from exc
    except OSError as exc:
        raise CharacterFormatError(f"Cannot read character file {path}: {exc.strerror or exc}") from exc

    character = parse_character(text, name=path.stem)
    log.debug(f"Loaded {character.name!r} from {path}: {len(character.frames)} frame(s), {character.width}x{character.height}")
    return character


def default_character() -> Character:
    """The built-in character."""
    return Character(name=DEFAULT_CHARACTER_NAME, frames=DEFAULT_CHARACTER_FRAMES)


def resolve_character(name: str | None, character_dir: str | Path | None = None) -> Character:
    """
    Find and load a character by name or path.

    Lookup order:
        1. ``None`` - the built-in character
        2. An existing file path
        3. ``<character_dir>/<name>.txt`` then ``<character_dir>/<name>.art``
    """
    if name is None:
        return default_character()

    candidate = Path(name).expanduser()
    if candidate.is_file():
        return load_character(candidate)

    searched: list[Path] = []
    if character_dir is not None:
        directory = Path(character_dir).expanduser()
        for suffix in CHARACTER_SUFFIXES:
            path = directory / f"{name}{suffix}"
            searched.append(path)
            if path.is_file():
                return load_character(path)

    log.debug(f"Character {name!r} not found, searched: {[str(p) for p in searched]}")
    available = list_characters(character_dir) if character_dir is not None else []
    hint = (
        f"Available characters: {', '.join(available)}"
        if available
        else f"Create {searched[0] if searched else name} or unset CUSTOMSAY_CHARACTER."
    )
    raise CharacterNotFoundError(f"Character not found: {name}", hint=hint)


def list_characters(character_dir: str | Path) -> list[str]:
    """Names of the character files in a directory, sorted."""
    directory = Path(character_dir).expanduser()
    if not directory.is_dir():
        return []
    return sorted({
        path.stem
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in CHARACTER_SUFFIXES
    })
