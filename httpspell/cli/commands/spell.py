"""Spell-check commands that run without the HTTP server."""

import typer
from rich.table import Table

from httpspell.cli.utils.async_runner import run_async
from httpspell.cli.utils.console import console, error_console
from httpspell.cli.utils.progress import create_spinner
from httpspell.services.dictionary.base import SpellMode, WordResult
from httpspell.services.dictionary.errors import BatchTimeout, DictionaryLoadError
from httpspell.services.spell import SpellService

TEXT_ARGUMENT = typer.Argument(..., help="Text to check")
LANG_OPTION = typer.Option(None, "--lang", "-l", help="Language code (default from settings)")


def check(text: str = TEXT_ARGUMENT, lang: str | None = LANG_OPTION) -> None:
    """Check spelling and show the best suggestion for each misspelled word."""
    results = run_async(_run(text, lang, SpellMode.CHECK))
    _print_results(results)


def suggest(text: str = TEXT_ARGUMENT, lang: str | None = LANG_OPTION) -> None:
    """Check spelling and show every suggestion for each misspelled word."""
    results = run_async(_run(text, lang, SpellMode.SUGGEST))
    _print_results(results)


def languages() -> None:
    """List dictionaries available in the dictionary directory."""
    service = SpellService.from_settings()
    available = service.cache.available_languages()
    if not available:
        console.print(f"[warning]No dictionaries found in {service.cache.root}[/]")
        return

    for lang in available:
        marker = " [dim](default)[/]" if lang == service.cache.default_lang else ""
        console.print(f"[word]{lang}[/]{marker}")


async def _run(text: str, lang: str | None, mode: SpellMode) -> list[WordResult]:
    """Async implementation of check and suggest."""
    service = SpellService.from_settings()
    try:
        with create_spinner() as progress:
            progress.add_task(f"Loading dictionary '{lang or service.cache.default_lang}'...")
            await service.cache.load(lang)
        return await service.run(text, lang, mode)
    except DictionaryLoadError as e:
        error_console.print(f"[error]Dictionary load error: {e}[/]")
        raise typer.Exit(1) from None
    except BatchTimeout as e:
        error_console.print(f"[error]{e}[/]")
        raise typer.Exit(1) from None


def _print_results(results: list[WordResult]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Word", style="word")
    table.add_column("Correct", justify="center")
    table.add_column("Suggestions", style="suggestion")

    misspelled = 0
    for result in results:
        if not result.word:
            continue
        if not result.correct:
            misspelled += 1
        table.add_row(
            result.word,
            "[success]yes[/]" if result.correct else "[error]no[/]",
            ", ".join(result.suggestions) or "[dim]-[/]",
        )

    console.print(table)
    if misspelled:
        console.print(f"[warning]{misspelled} misspelled word(s)[/]")
    else:
        console.print("[success]No spelling errors[/]")
