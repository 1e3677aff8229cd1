"""CLI entry point: argument parsing, dispatch and the error boundary.

:func:`cli` is the only place that turns exceptions into process exit
codes. Everything below it raises :class:`~customsay.exceptions.CustomsayError`
subclasses and lets them propagate.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape

from customsay.cli import exit_codes
from customsay.cli.app import ClickUsageError, create_app
from customsay.cli.player import Player
from customsay.cli.terminal import Terminal
from customsay.config import Settings, get_settings
from customsay.core.invocation import Animate, Invocation, Say
from customsay.exceptions import CustomsayError, UsageError
from customsay.io.reader import resolve_character
from customsay.logging import configure_logging, get_logger
from customsay.render.scene import SceneRenderer

PROG_NAME = "customsay"

log = get_logger("cli")
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _missing_command_error(command) -> UsageError:
    """Usage error for a run without a command, listing the commands."""
    ctx = command.make_context(PROG_NAME, [], resilient_parsing=True)
    lines = [
        "Missing command.",
        "",
        f"Usage: {PROG_NAME} [OPTIONS] COMMAND [ARGS]...",
        "",
        "Commands:",
    ]
    for name in command.list_commands(ctx):
        sub = command.get_command(ctx, name)
        lines.append(f"  {name:<8} {sub.get_short_help_str(limit=80)}")
    return UsageError("\n".join(lines), hint=f"Try '{PROG_NAME} --help' for help.")


def parse_invocation(argv: Sequence[str] | None = None) -> Invocation | None:
    """Parse command-line arguments into an Invocation.

    Parameters
    ----------
    argv:
        Arguments without the program name. ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    Invocation | None
        ``None`` when ``--help``, ``help`` or ``--version`` printed their
        output instead of selecting a command.

    Raises
    ------
    UsageError
        No command, unknown command, unknown option, missing or extra
        arguments.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    command = typer.main.get_command(create_app())
    if not args:
        raise _missing_command_error(command)

    try:
        result = command.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except ClickUsageError as exc:
        raise UsageError(
            exc.format_message(),
            hint=f"Try '{PROG_NAME} --help' for help.",
        ) from exc

    if isinstance(result, (Say, Animate)):
        return result
    return None


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def run(invocation: Invocation, settings: Settings, terminal: Terminal | None = None) -> int:
    """Render or animate the configured character for an Invocation."""
    terminal = terminal or Terminal()
    character = resolve_character(settings.character, settings.character_dir)

    # Bubble sides and padding take 4 columns
    width = max(1, min(settings.bubble_width, terminal.size().cols - 4))
    renderer = SceneRenderer(bubble_width=width)
    log.debug(f"Running {invocation!r} with {character.name!r}, bubble width {width}")

    if isinstance(invocation, Say):
        terminal.write(renderer.render(character.frame(0), invocation.text) + "\n")
    elif not character.is_animated:
        log.debug(f"{character.name!r} has a single frame, nothing to animate")
        terminal.write(renderer.render(character.frame(0), invocation.text) + "\n")
    else:
        scenes = renderer.render_all(character, invocation.text)
        Player(terminal).play(scenes, delay=settings.frame_delay, loops=settings.loops)
    return exit_codes.SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """Run the customsay CLI and return the process exit code."""
    invocation = parse_invocation(argv)
    if invocation is None:
        return exit_codes.SUCCESS

    settings = get_settings()
    configure_logging(settings)
    return run(invocation, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(exc: CustomsayError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Console-script entry point; never exits with a raw stack trace."""
    try:
        code = main()
    except UsageError as exc:
        _report(exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except CustomsayError as exc:
        _report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        log.exception("Unexpected error")
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
    sys.exit(code)


if __name__ == "__main__":
    cli()
