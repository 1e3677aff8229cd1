"""Allow ``python -m customsay``."""

from customsay.cli.main import cli

if __name__ == "__main__":
    cli()
