"""Exit codes returned by the customsay command."""

SUCCESS: int = 0
"""Command completed without error."""

GENERAL_ERROR: int = 1
"""A known CustomsayError was caught and reported."""

USAGE_ERROR: int = 2
"""Arguments did not match the command grammar (same code click uses)."""

UNEXPECTED_ERROR: int = 3
"""An unhandled exception escaped the command."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C (128 + SIGINT)."""
