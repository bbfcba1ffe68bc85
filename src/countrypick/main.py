import locale as _locale
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from countrypick.application import SuggestionSession, build_candidate_pool, filter_suggestions
from countrypick.config import AppConfig, load_config
from countrypick.domain.events import EventBus
from countrypick.domain.types import CandidatePool
from countrypick.infrastructure.providers import create_provider
from countrypick.logger import get_logger, setup_logger

load_dotenv()

console = Console()

cli = typer.Typer(
    name="countrypick",
    help="Country name autocomplete in the terminal",
    epilog="""
    Examples:
    $ countrypick run --locale tr_TR
    $ countrypick suggest "ch" --names-file countries.txt
    """,
    add_completion=False,
)

LocaleOption = typer.Option(None, "--locale", "-l", help="Locale used for case-insensitive matching")
DisplayLocaleOption = typer.Option(None, "--display-locale", help="Language of the country names")
NamesFileOption = typer.Option(None, "--names-file", "-f", help="Read names from a file, one per line")


def configure_collation() -> None:
    """Adopt the platform's default collation for pool sorting."""
    logger = get_logger("main")
    try:
        _locale.setlocale(_locale.LC_COLLATE, "")
    except _locale.Error as e:
        logger.warning(f"Falling back to code point collation: {e}")


def resolve_config(**overrides) -> AppConfig:
    try:
        return load_config(**overrides)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def load_pool(config: AppConfig) -> CandidatePool:
    logger = get_logger("main")
    provider = create_provider(config)
    try:
        raw_names = provider.list_available_display_names()
    except FileNotFoundError as e:
        raise typer.BadParameter(str(e), param_hint="--names-file")

    pool = build_candidate_pool(raw_names)
    logger.info(f"Candidate pool ready: {len(pool)} name(s) from {type(provider).__name__}")
    return pool


@cli.command()
def run(
    locale: Optional[str] = LocaleOption,
    display_locale: Optional[str] = DisplayLocaleOption,
    names_file: Optional[Path] = NamesFileOption,
    debounce_ms: Optional[int] = typer.Option(None, "--debounce-ms", help="Delay before filtering, in ms"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Launch the autocomplete screen."""
    config = resolve_config(
        locale=locale,
        display_locale=display_locale,
        names_file=names_file,
        debounce_ms=debounce_ms,
        debug=debug or None,
    )
    setup_logger(log_level="DEBUG" if config.debug else "INFO")
    logger = get_logger("main")
    logger.info(f"Starting countrypick: {config}")

    configure_collation()
    pool = load_pool(config)

    # Imported here so the non-interactive commands don't pay for Textual.
    from countrypick.presentation.tui import CountryPickApp

    session = SuggestionSession(
        pool,
        locale=config.locale,
        event_bus=EventBus(),
        debounce=config.debounce_seconds,
        off_thread=config.off_thread,
    )
    app = CountryPickApp(session)
    app.run()

    logger.info(f"countrypick exited with query {session.query!r}")
    if session.query:
        console.print(session.query)


@cli.command()
def suggest(
    query: str = typer.Argument(..., help="Text typed so far"),
    locale: Optional[str] = LocaleOption,
    display_locale: Optional[str] = DisplayLocaleOption,
    names_file: Optional[Path] = NamesFileOption,
):
    """Print the suggestions the dropdown would show for QUERY."""
    config = resolve_config(locale=locale, display_locale=display_locale, names_file=names_file)
    configure_collation()
    pool = load_pool(config)

    suggestions = filter_suggestions(pool, query, config.locale)
    if not suggestions:
        console.print(f"[yellow]No suggestions for {query!r}[/]")
        raise typer.Exit(code=1)

    table = Table(title=f"Suggestions for {query!r}", show_header=True, header_style="bold green")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Country", style="cyan")
    for index, name in enumerate(suggestions, 1):
        table.add_row(str(index), name)
    console.print(table)


@cli.command()
def names(
    locale: Optional[str] = LocaleOption,
    display_locale: Optional[str] = DisplayLocaleOption,
    names_file: Optional[Path] = NamesFileOption,
):
    """Print the full candidate pool."""
    config = resolve_config(locale=locale, display_locale=display_locale, names_file=names_file)
    configure_collation()
    pool = load_pool(config)

    for name in pool:
        console.print(name, markup=False)
    console.print(f"[dim]{len(pool)} name(s)[/]")


def main():
    """Entry point for the countrypick console script."""
    cli()


if __name__ == "__main__":
    main()
