"""
plurality CLI - Entry point.

Commands:
    plural WORD...       Pluralize each word
    singular WORD...     Singularize each word
    pluralize WORD       Inflect a word for a count
    check WORD           Report whether a word looks plural or singular
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from plurality._version import get_version
from plurality.core.environment import get_log_level, get_rules_path
from plurality.core.errors import PluralityError
from plurality.core.inflector import Inflector
from plurality.core.rules_loader import apply_rules, load_rules_file

app = typer.Typer(
    help="""plurality – rule-based English noun inflection

Rules files (TOML) given with --rules, or named by the PLURALITY_RULES
environment variable, extend the default rules.
""",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"plurality {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def _build_inflector(rules: Path | None) -> Inflector:
    inflector = Inflector()
    for path in (get_rules_path(), rules):
        if path is not None:
            apply_rules(inflector, load_rules_file(path))
    return inflector


@app.callback()
def main_callback(
    ctx: typer.Context,
    rules: Path | None = typer.Option(  # noqa: B008
        None,
        "--rules",
        "-r",
        help="TOML rules file applied on top of the default rules",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """plurality CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        ctx.obj = _build_inflector(rules)
    except PluralityError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1) from e


@app.command("plural")
def plural_command(
    ctx: typer.Context,
    words: list[str] = typer.Argument(..., help="Words to pluralize"),  # noqa: B008
) -> None:
    """Pluralize each word, one result per line."""
    inflector: Inflector = ctx.obj
    for word in words:
        typer.echo(inflector.plural(word))


@app.command("singular")
def singular_command(
    ctx: typer.Context,
    words: list[str] = typer.Argument(..., help="Words to singularize"),  # noqa: B008
) -> None:
    """Singularize each word, one result per line."""
    inflector: Inflector = ctx.obj
    for word in words:
        typer.echo(inflector.singular(word))


@app.command("pluralize")
def pluralize_command(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to inflect"),
    count: int = typer.Option(2, "--count", "-c", help="How many of the word exist"),
    inclusive: bool = typer.Option(False, "--inclusive", "-i", help="Prefix the result with the count"),
) -> None:
    """Pluralize or singularize a word based on --count."""
    inflector: Inflector = ctx.obj
    typer.echo(inflector.pluralize(word, count, inclusive))


@app.command("check")
def check_command(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to check"),
) -> None:
    """Report whether a word looks plural, singular, both or neither."""
    inflector: Inflector = ctx.obj
    is_plural = inflector.is_plural(word)
    is_singular = inflector.is_singular(word)

    if is_plural and is_singular:
        typer.echo("both")
    elif is_plural:
        typer.echo("plural")
    elif is_singular:
        typer.echo("singular")
    else:
        typer.echo("neither")


def main() -> None:
    app(standalone_mode=True)


if __name__ == "__main__":
    main()
