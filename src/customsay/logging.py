"""
Logging setup for customsay.

Logging is silent by default. Set CUSTOMSAY_DEBUG=1 to get debug
output on stderr, and CUSTOMSAY_LOG_FILE to also append it to a file.
"""

import sys

from loguru import logger

from customsay.config import Settings

_configured: bool = False


def configure_logging(settings: Settings) -> None:
    """
    Configure loguru from settings.

    If debug is disabled, logging goes nowhere (no sinks).
    If debug is enabled, logs go to stderr and optionally a file.
    """
    global _configured
    if _configured:
        return

    # Remove default stderr handler
    logger.remove()
    logger.configure(extra={"name": "customsay"})

    if settings.debug:
        logger.enable("customsay")
        logger.add(
            sys.stderr,
            format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | {extra[name]}: {message}",
            level="DEBUG",
            colorize=True,
        )
        if settings.log_file is not None:
            settings.log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                settings.log_file,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[name]}: {message}",
                level="DEBUG",
            )
        logger.bind(name="customsay").debug(f"Settings: {settings.model_dump()}")

    _configured = True


def reset_logging() -> None:
    """Drop all sinks and allow configure_logging() to run again."""
    global _configured
    logger.remove()
    logger.disable("customsay")
    _configured = False


def get_logger(name: str = "customsay"):
    """
    Get a logger bound to a component name.

    Args:
        name: Component name shown in each record
    """
    return logger.bind(name=name)
