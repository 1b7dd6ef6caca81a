"""Command-line interface for transchoice."""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Annotated, Any, Callable, Optional, TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from transchoice.config import I18nConfig
from transchoice.errors import TranslationError
from transchoice.i18n import I18n
from transchoice.loader import load_catalog_file
from transchoice.plural import parse_choice_rules, select_rule

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="transchoice",
    help="Resolve translation keys and countable phrases against locale catalogs",
    add_completion=False,
)

F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Convert any error into a red message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (typer.Exit, typer.BadParameter):
            raise
        except TranslationError as e:
            typer.echo(typer.style(f"Error: {e.message}", fg="red"), err=True)
            raise typer.Exit(1)
        except Exception as e:
            logger.exception("Unexpected error")
            typer.echo(typer.style(f"Error: {e}", fg="red"), err=True)
            raise typer.Exit(1)

    return wrapper  # type: ignore


def configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("TRANSCHOICE_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_options(pairs: list[str] | None) -> dict[str, str]:
    """Parse ``name=value`` pairs into placeholder options."""
    options: dict[str, str] = {}
    for pair in pairs or []:
        if "=" not in pair:
            raise typer.BadParameter(f"Expected name=value, got {pair!r}", param_hint="--option")
        name, value = pair.split("=", 1)
        options[name.strip()] = value
    return options


def build_i18n(
    catalogs: list[Path] | None,
    locale: str | None,
    fallback: str | None,
) -> I18n:
    """Create an engine from catalog files; each file's stem is its locale."""
    config = I18nConfig.from_env()
    if fallback:
        config = config.with_overrides(fallback_locale=fallback)

    i18n = I18n(config)
    for path in catalogs or []:
        i18n.set_messages(path.stem, load_catalog_file(path))

    if locale:
        i18n.set_locale_sync(locale)
    return i18n


CatalogOption = Annotated[
    Optional[list[Path]],
    typer.Option("--catalog", "-c", help="Catalog file (JSON or YAML), locale taken from file name"),
]
LocaleOption = Annotated[
    Optional[str],
    typer.Option("--locale", "-l", help="Locale to activate"),
]
FallbackOption = Annotated[
    Optional[str],
    typer.Option("--fallback", help="Fallback locale"),
]
PlaceholderOption = Annotated[
    Optional[list[str]],
    typer.Option("--option", "-o", help="Placeholder value as name=value"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show diagnostic log output"),
]


@app.command(name="translate")
@error_boundary
def translate_cmd(
    key: Annotated[str, typer.Argument(help="Phrase key or dotted path key")],
    catalog: CatalogOption = None,
    locale: LocaleOption = None,
    fallback: FallbackOption = None,
    option: PlaceholderOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Translate a key.

    Examples:
        transchoice translate errors.not_found -c en.json
        transchoice translate greeting -c en.json -c de.json -l de -o name=Ada
    """
    configure_logging(verbose)
    i18n = build_i18n(catalog, locale, fallback)
    typer.echo(i18n.t(key, parse_options(option)))


@app.command(name="choice")
@error_boundary
def choice_cmd(
    key: Annotated[str, typer.Argument(help="Phrase key or dotted path key")],
    count: Annotated[int, typer.Argument(help="Quantity to select the phrase for")],
    catalog: CatalogOption = None,
    locale: LocaleOption = None,
    fallback: FallbackOption = None,
    option: PlaceholderOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Translate a countable key for a quantity.

    Examples:
        transchoice choice cart.items 3 -c en.json -o n=3
    """
    configure_logging(verbose)
    i18n = build_i18n(catalog, locale, fallback)
    typer.echo(i18n.tc(key, count, parse_options(option)))


@app.command(name="rules")
def rules_cmd(
    text: Annotated[str, typer.Argument(help="Countable message, variants separated by |")],
    count: Annotated[
        Optional[int],
        typer.Option("--count", "-n", help="Highlight the variant selected for this count"),
    ] = None,
) -> None:
    """Show how a countable message is parsed into choice rules."""
    rules = parse_choice_rules(text)
    selected = select_rule(rules, count) if count is not None else None

    table = Table(title="Choice Rules")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Range")
    table.add_column("Text", style="green")
    table.add_column("Raw", style="dim")
    if count is not None:
        table.add_column(f"count={count}", justify="center")

    for index, rule in enumerate(rules, start=1):
        row = [
            str(index),
            rule.kind.value,
            escape(rule.describe()),
            escape(repr(rule.text)),
            escape(repr(rule.raw)),
        ]
        if count is not None:
            row.append("[bold green]selected[/bold green]" if rule is selected else "")
        table.add_row(*row)

    console = Console()
    console.print(table)

    if count is not None and selected is None:
        console.print(f"[yellow]No rule matches {count}; the message is returned unchanged.[/yellow]")


@app.command(name="locales")
@error_boundary
def locales_cmd(
    catalog: CatalogOption = None,
) -> None:
    """List the locales provided by catalog files."""
    i18n = build_i18n(catalog, None, None)
    for locale_code in i18n.locales:
        typer.echo(locale_code)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
