"""Runtime settings, read from ``CUSTOMSAY_*`` environment variables.

Values may also live in a ``.env`` file, either in the working
directory or in the per-user config directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from customsay.exceptions import ConfigurationError


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "customsay"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "customsay"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "customsay"
    return Path.home() / ".config" / "customsay"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class Settings(BaseSettings):
    """Settings for rendering and animation."""

    model_config = SettingsConfigDict(
        env_prefix="CUSTOMSAY_",
        extra="ignore",
        case_sensitive=False,
        env_file_encoding="utf-8",
    )

    character: str | None = Field(
        default=None,
        description="Character name or path to a character file. Unset uses the built-in cat.",
    )
    character_dir: Path = Field(
        default_factory=lambda: get_user_config_dir() / "characters",
        description="Directory searched for <name>.txt / <name>.art character files.",
    )
    bubble_width: int = Field(
        default=40,
        ge=1,
        le=200,
        description="Maximum text width inside the speech bubble.",
    )
    frame_delay: float = Field(
        default=0.15,
        gt=0,
        le=10,
        description="Seconds between animation frames.",
    )
    loops: int = Field(
        default=3,
        ge=1,
        le=1000,
        description="Number of times the animation cycles through all frames.",
    )
    debug: bool = Field(
        default=False,
        description="Write debug logs to stderr.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Also append debug logs to this file.",
    )


def get_settings() -> Settings:
    """
    Load settings from the environment and the ``.env`` files.

    The per-user ``.env`` path is resolved on every call, so a changed
    XDG_CONFIG_HOME is honored. Validation failures become
    ConfigurationError.
    """
    try:
        return Settings(_env_file=(".env", get_user_env_file()))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration: {problems}",
            hint="Check CUSTOMSAY_* environment variables and your .env files.",
        ) from exc
