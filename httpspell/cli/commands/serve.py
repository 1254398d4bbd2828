"""Serve command for running the HTTP server."""

import typer

from httpspell.cli.utils.console import console
from httpspell.config import settings


def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the spell-check HTTP server."""
    from httpspell.main import run

    console.print(
        f"[info]Serving on http://{host or settings.host}:{port or settings.port} "
        f"(dictionaries in {settings.dictionary_dir})[/]"
    )
    run(host=host, port=port, reload=reload)
