"""Command line interface for tablepage."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import cyclopts

from tablepage import __version__
from tablepage.config import get_config
from tablepage.config.logging import get_logger, setup_logging
from tablepage.database import create_data_source
from tablepage.exceptions import ConfigurationError, FetchFailure
from tablepage.rendering import TableRenderer, render_page
from tablepage.theme.manager import create_console

from .display import DisplayManager

console = create_console()
logger = get_logger(__name__)

app = cyclopts.App(
    name="tablepage",
    help="Render database tables as HTML",
)


def _database_url(database: str | None) -> str:
    if database:
        return database
    config = get_config()
    try:
        config.validate()
    except ConfigurationError as exc:
        DisplayManager(console).show_error(str(exc))
        logger.error("cli.db.none_configured")
        raise SystemExit(1)
    return config.database_url


@app.command
def render(
    *tables: str,
    database: Annotated[
        str | None,
        cyclopts.Parameter(
            ["--db", "-d"],
            help="Database URL (defaults to DATABASE_URL env var)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        cyclopts.Parameter(["--output", "-o"], help="Write the page to a file"),
    ] = None,
    title: Annotated[
        str | None,
        cyclopts.Parameter(["--title"], help="Page title"),
    ] = None,
):
    """Render one or more tables into a single HTML page.

    Tables default to TABLEPAGE_TABLES. Exits with status 1 when any table
    could not be read; the page is written either way.
    """
    config = get_config()
    table_names = list(tables) or config.tables
    if not table_names:
        console.print("[bold error]Error:[/bold error] No tables given.")
        console.print("[info]Pass table names or set TABLEPAGE_TABLES.[/info]")
        raise SystemExit(1)

    url = _database_url(database)
    logger.info("cli.render.start", tables=table_names)

    async def run():
        async with create_data_source(url) as source:
            return await render_page(source, table_names, title=title or config.title)

    try:
        page = asyncio.run(run())
    except ConfigurationError as exc:
        DisplayManager(console).show_error(str(exc))
        raise SystemExit(1)

    if output is not None:
        try:
            output.write_text(page.document, encoding="utf-8")
        except OSError as exc:
            DisplayManager(console).show_error(f"Could not write {output}: {exc}")
            logger.error(
                "cli.render.write_failed", output=str(output), error=str(exc)
            )
            raise SystemExit(1)
        console.print(f"[success]✓ Wrote {output}[/success]", highlight=False)
    else:
        sys.stdout.write(page.document)

    # stdout may carry the page itself
    errors = DisplayManager(create_console(stderr=True))
    for failure in page.failures:
        errors.show_failure(failure)

    logger.info(
        "cli.render.complete", tables=len(page.results), failed=len(page.failures)
    )
    if page.failures:
        raise SystemExit(1)


@app.command
def show(
    table: str,
    database: Annotated[
        str | None,
        cyclopts.Parameter(
            ["--db", "-d"],
            help="Database URL (defaults to DATABASE_URL env var)",
        ),
    ] = None,
    limit: Annotated[
        int,
        cyclopts.Parameter(["--limit", "-n"], help="Maximum rows to display"),
    ] = 20,
):
    """Print a table in the terminal."""
    url = _database_url(database)
    display = DisplayManager(console)

    async def run():
        async with create_data_source(url) as source:
            return await source.fetch_rows(table)

    try:
        rowset = asyncio.run(run())
    except ConfigurationError as exc:
        display.show_error(str(exc))
        raise SystemExit(1)
    except FetchFailure as exc:
        display.show_failure(TableRenderer().render_failure(table, exc))
        raise SystemExit(1)

    display.show_rowset(table, rowset, limit=max(0, limit))


@app.command
def version():
    """Show the CLI version."""
    console.print(f"tablepage v{__version__}")


@app.meta.default
def launcher(
    *tokens: Annotated[str, cyclopts.Parameter(show=False, allow_leading_hyphen=True)],
):
    setup_logging(get_config().log_level)
    app(tokens)


def main():
    app.meta()


if __name__ == "__main__":
    main()
