"""Tests for characters and character files."""

from pathlib import Path

import pytest

from customsay.core.character import Character
from customsay.core.constants import DEFAULT_CHARACTER_FRAMES
from customsay.exceptions import CharacterFormatError, CharacterNotFoundError
from customsay.io.reader import list_characters, load_character, parse_character, resolve_character


class TestCharacter:
    """Tests for the Character dataclass."""

    def test_dimensions(self) -> None:
        character = Character("x", frames=(("ab", "abcd"), ("a",)))
        assert character.width == 4
        assert character.height == 2
        assert character.is_animated is True

    def test_width_ignores_ansi(self) -> None:
        character = Character("x", frames=(("\x1b[38;2;255;0;0mab\x1b[0m",),))
        assert character.width == 2
        assert character.is_animated is False

    def test_width_counts_wide_characters(self) -> None:
        assert Character("x", frames=(("猫猫",),)).width == 4

    def test_frame_wraps_around(self) -> None:
        character = Character("x", frames=(("1",), ("2",)))
        assert character.frame(0) == ("1",)
        assert character.frame(3) == ("2",)

    def test_no_frames(self) -> None:
        with pytest.raises(ValueError):
            Character("x", frames=())


class TestParseCharacter:
    """Tests for parsing character text."""

    def test_single_frame(self) -> None:
        character = parse_character(" /\\\n(  )\n", name="egg")
        assert character.name == "egg"
        assert character.frames == ((" /\\", "(  )"),)

    def test_frames_split_on_separator(self) -> None:
        character = parse_character("a\n%%\nb\n%%\nc")
        assert character.frames == (("a",), ("b",), ("c",))

    def test_blank_lines_around_frames_dropped(self) -> None:
        character = parse_character("\n\n a \n\n b\n\n%%\n\nc\n\n")
        assert character.frames == ((" a", "", " b"), ("c",))

    def test_empty_frames_skipped(self) -> None:
        character = parse_character("%%\n%%\nonly\n%%\n")
        assert character.frames == (("only",),)

    def test_separator_with_trailing_spaces(self) -> None:
        assert len(parse_character("a\n%%  \nb").frames) == 2

    def test_empty_text(self) -> None:
        with pytest.raises(CharacterFormatError):
            parse_character("\n  \n%%\n")


class TestLoadCharacter:
    """Tests for loading and resolving character files."""

    def test_load_file(self, dog_file: Path) -> None:
        character = load_character(dog_file)
        assert character.name == "dog"
        assert len(character.frames) == 2
        assert character.frames[0][0] == "  __"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CharacterFormatError):
            load_character(tmp_path / "missing.txt")

    def test_load_non_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(CharacterFormatError) as exc_info:
            load_character(path)
        assert exc_info.value.hint

    def test_resolve_default(self) -> None:
        character = resolve_character(None)
        assert character.name == "cat"
        assert character.frames == DEFAULT_CHARACTER_FRAMES

    def test_resolve_by_name(self, dog_file: Path, character_dir: Path) -> None:
        assert resolve_character("dog", character_dir).name == "dog"

    def test_resolve_art_suffix(self, character_dir: Path) -> None:
        (character_dir / "fish.art").write_text("><>", encoding="utf-8")
        assert resolve_character("fish", character_dir).frames == (("><>",),)

    def test_resolve_by_path(self, tmp_path: Path) -> None:
        path = tmp_path / "elsewhere.txt"
        path.write_text("(:", encoding="utf-8")
        assert resolve_character(str(path)).name == "elsewhere"

    def test_resolve_unknown_lists_available(self, dog_file: Path, character_dir: Path) -> None:
        with pytest.raises(CharacterNotFoundError) as exc_info:
            resolve_character("cow", character_dir)
        assert "dog" in exc_info.value.hint

    def test_resolve_unknown_without_dir(self) -> None:
        with pytest.raises(CharacterNotFoundError):
            resolve_character("cow")

    def test_list_characters(self, character_dir: Path) -> None:
        for name in ("b.txt", "a.art", "a.txt", "notes.md"):
            (character_dir / name).write_text("x", encoding="utf-8")
        assert list_characters(character_dir) == ["a", "b"]

    def test_list_characters_missing_dir(self, tmp_path: Path) -> None:
        assert list_characters(tmp_path / "nope") == []
