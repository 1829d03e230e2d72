"""Table rendering against a row set provider."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from tablepage.config.logging import get_logger
from tablepage.exceptions import FetchFailure

from .base import FormatterProtocol
from .html_renderer import HtmlTableFormatter
from .models import RenderResult, RowSet

logger = get_logger(__name__)


class RowSetProvider(Protocol):
    async def fetch_rows(self, table: str) -> RowSet:
        """Return all rows of ``table`` or raise FetchFailure."""
        ...


class TableRenderer:
    """Render tables fetched from a provider into document fragments."""

    def __init__(self, formatter: FormatterProtocol | None = None):
        self.formatter = formatter or HtmlTableFormatter()

    async def render(self, provider: RowSetProvider, table: str) -> RenderResult:
        """Fetch ``table`` from ``provider`` and render it.

        Errors raised by the provider are returned as failed results, never
        raised. Cancellation still propagates.
        """
        try:
            rowset = await provider.fetch_rows(table)
        except FetchFailure as exc:
            return self.render_failure(table, exc)
        except Exception as exc:
            failure = FetchFailure(table, f"Error fetching data from {table}", exc)
            return self.render_failure(table, failure)
        return self.render_rowset(table, rowset)

    def render_rowset(self, table: str, rowset: RowSet) -> RenderResult:
        document = self.formatter.format_table(table, rowset)
        logger.debug(
            "render.table.success",
            table=table,
            columns=len(rowset.columns),
            rows=len(rowset.rows),
        )
        return RenderResult.success(table, document)

    def render_failure(self, table: str, error: FetchFailure) -> RenderResult:
        cause = error.cause or error
        message = f"Error fetching data from {table}: {cause}"
        logger.warning("render.table.failed", table=table, error=str(cause))
        return RenderResult.failure(table, message, cause)

    def fragment(self, result: RenderResult) -> str:
        """Return the document fragment for a result of either kind."""
        if result.ok:
            return result.document
        return self.formatter.format_failure(result)


@dataclass(frozen=True, slots=True)
class PageResult:
    """A rendered page and the per-table results that produced it."""

    document: str
    results: tuple[RenderResult, ...]

    @property
    def failures(self) -> tuple[RenderResult, ...]:
        return tuple(result for result in self.results if not result.ok)


async def render_page(
    provider: RowSetProvider,
    tables: Iterable[str],
    *,
    title: str | None = None,
    renderer: TableRenderer | None = None,
) -> PageResult:
    """Render several tables, in order, into a single document."""
    renderer = renderer or TableRenderer()
    results: list[RenderResult] = []
    for table in tables:
        results.append(await renderer.render(provider, table))

    fragments = [renderer.fragment(result) for result in results]
    document = renderer.formatter.document(fragments, title)
    logger.info(
        "render.page.complete",
        tables=len(results),
        failed=sum(1 for result in results if not result.ok),
    )
    return PageResult(document=document, results=tuple(results))
