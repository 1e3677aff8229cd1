"""Exception hierarchy for customsay.

Every user-visible error condition maps to a subclass of
:class:`CustomsayError`, so the CLI error boundary can print a clean
message instead of a stack trace.

Hierarchy
---------
CustomsayError
├── UsageError
├── CharacterNotFoundError
├── CharacterFormatError
└── ConfigurationError
"""

from __future__ import annotations


class CustomsayError(Exception):
    """Base exception for all customsay errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


class UsageError(CustomsayError):
    """Raised when command-line arguments do not match the accepted grammar."""


# --- Characters -------------------------------------------------------------

class CharacterNotFoundError(CustomsayError):
    """Raised when a configured character file cannot be located."""


class CharacterFormatError(CustomsayError):
    """Raised when a character file is unreadable or holds no frames."""


# --- Configuration ----------------------------------------------------------

class ConfigurationError(CustomsayError):
    """Raised when settings fail validation."""
