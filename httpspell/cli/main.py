"""Main CLI application entry point."""

import typer

from httpspell.cli.commands import serve, spell
from httpspell.logging_config import setup_logging

app = typer.Typer(
    name="httpspell",
    help="Spell checking and suggestions over HTTP",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    """Configure logging before running a command."""
    setup_logging(level="DEBUG" if verbose else None)


app.command(name="serve", help="Run the HTTP server")(serve.serve)
app.command(name="check", help="Check spelling of a text")(spell.check)
app.command(name="suggest", help="List suggestions for misspelled words")(spell.suggest)
app.command(name="languages", help="List available dictionaries")(spell.languages)


if __name__ == "__main__":
    app()
