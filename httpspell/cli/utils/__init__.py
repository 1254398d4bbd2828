"""CLI utility modules."""

from httpspell.cli.utils.async_runner import run_async
from httpspell.cli.utils.console import console, error_console
from httpspell.cli.utils.progress import create_spinner

__all__ = ["run_async", "console", "error_console", "create_spinner"]
