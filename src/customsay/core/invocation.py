"""Invocation - the parsed form of one command-line run."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Say:
    """Display the character saying ``text``."""
    text: str


@dataclass(frozen=True, slots=True)
class Animate:
    """Play the character's frames, optionally with a speech bubble."""
    text: str | None = None


Invocation = Union[Say, Animate]
