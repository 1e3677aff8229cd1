"""Typer application declaring the customsay command grammar."""

from typing import Annotated, Optional

import typer

from customsay import __version__
from customsay.core.invocation import Animate, Say

# typer may bundle its own copy of click; take UsageError from that copy
ClickUsageError: type[Exception] = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"customsay {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """
    Create the CLI application.

    Commands only build an Invocation and return it; running it is
    left to the caller (see ``customsay.cli.main``).
    """
    app = typer.Typer(
        name="customsay",
        help="A customizable CLI program like cowsay - create your own animated ASCII art character!",
        no_args_is_help=True,
        add_completion=False,
        rich_markup_mode="rich",
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.callback()
    def root(
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                "-V",
                help="Show the version and exit.",
                callback=_version_callback,
                is_eager=True,
            ),
        ] = False,
    ) -> None:
        """A customizable CLI program like cowsay - create your own animated ASCII art character!"""

    @app.command()
    def say(
        text: Annotated[str, typer.Argument(help="The text for your character to say")],
    ) -> Say:
        """Display your character saying the provided text."""
        return Say(text=text)

    @app.command()
    def animate(
        text: Annotated[Optional[str], typer.Argument(help="Optional text for your character to say")] = None,
    ) -> Animate:
        """Display an animated version of your character."""
        return Animate(text=text)

    @app.command("help")
    def help_(
        ctx: typer.Context,
        command: Annotated[Optional[str], typer.Argument(help="Command to show help for")] = None,
    ) -> None:
        """Print this message or the help of the given command."""
        group_ctx = ctx.parent
        if command is None:
            typer.echo(group_ctx.get_help())
            raise typer.Exit()

        sub = group_ctx.command.get_command(group_ctx, command)
        if sub is None:
            raise ClickUsageError(f"No such command '{command}'.", ctx=group_ctx)
        with sub.make_context(command, [], parent=group_ctx, resilient_parsing=True) as sub_ctx:
            typer.echo(sub.get_help(sub_ctx))
        raise typer.Exit()

    return app
