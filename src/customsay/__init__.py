"""
customsay: a cowsay-like tool with your own ASCII art character

Have a custom character say something, or play its frames as a
small terminal animation.

Quick Start:
    >>> import customsay
    >>> print(customsay.say("Hello world"))

Command line:
    customsay say "Hello world"
    customsay animate "Hi"

Features:
    - Character files are plain UTF-8 text, frames separated by ``%%``
    - ANSI SGR colors in character files are preserved
    - cowsay-style speech bubbles with word wrapping
    - In-place frame animation for interactive terminals
"""

__version__ = "0.1.0"

from loguru import logger

# Silent unless the CLI turns debug logging on
logger.disable("customsay")

# Core types
from customsay.core.character import Character
from customsay.core.invocation import Animate, Invocation, Say

# Character files
from customsay.io.reader import load_character, resolve_character

# Rendering
from customsay.render.bubble import BubbleRenderer
from customsay.render.scene import SceneRenderer


def say(text: str, character: Character | None = None, width: int = 40) -> str:
    """Render a character saying text as a printable string."""
    character = character or resolve_character(None)
    return SceneRenderer(bubble_width=width).render(character.frames[0], text)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Character",
    "Invocation",
    "Say",
    "Animate",
    # I/O
    "load_character",
    "resolve_character",
    # Rendering
    "BubbleRenderer",
    "SceneRenderer",
    "say",
]
