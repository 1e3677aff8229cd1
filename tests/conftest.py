"""Pytest configuration: isolate every test from the user's environment."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from customsay.config import Settings
from customsay.logging import reset_logging


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config lookups at a temp dir and drop CUSTOMSAY_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("CUSTOMSAY_"):
            monkeypatch.delenv(key)

    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    # Wide enough that Rich help tables do not wrap
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.chdir(tmp_path)

    yield config_home

    reset_logging()


@pytest.fixture
def character_dir(isolated_env: Path) -> Path:
    """Empty per-user characters directory."""
    path = isolated_env / "customsay" / "characters"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def dog_file(character_dir: Path) -> Path:
    """A two-frame character file named 'dog'."""
    path = character_dir / "dog.txt"
    path.write_text(
        "\n"
        "  __\n"
        "o'')}____//\n"
        " `_/      )\n"
        " (_(_/-(_/\n"
        "%%\n"
        "  __\n"
        "o'')}____//\n"
        " `_/      )\n"
        " (_/(_/-(_/\n"
        "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def settings(character_dir: Path) -> Settings:
    """Settings that ignore .env files."""
    return Settings(_env_file=None, character_dir=character_dir, frame_delay=0.01, loops=1)
