"""Rich progress utilities."""

from rich.progress import Progress, SpinnerColumn, TextColumn

from httpspell.cli.utils.console import error_console


def create_spinner() -> Progress:
    """Create a transient spinner for work of unknown length, drawn on stderr."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=error_console,
        transient=True,
    )
