"""Core data structures for characters and parsed invocations."""

from customsay.core.character import Character
from customsay.core.invocation import Animate, Invocation, Say

__all__ = ["Character", "Invocation", "Say", "Animate"]
