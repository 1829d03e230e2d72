"""Base interface for table data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tablepage.exceptions import FetchFailure
from tablepage.rendering.models import RowSet


def quote_identifier(table: str) -> str:
    """Quote a ``name`` or ``schema.name`` table identifier for SQL.

    Raises:
        FetchFailure: If the identifier or one of its parts is empty
    """
    parts = table.split(".") if table else []
    if not parts or any(not part.strip() for part in parts):
        raise FetchFailure(table, f"Invalid table identifier: {table!r}")
    return ".".join('"' + part.replace('"', '""') + '"' for part in parts)


def select_all(table: str) -> str:
    return f"SELECT * FROM {quote_identifier(table)}"


class BaseDataSource(ABC):
    """Abstract source of table rows."""

    @abstractmethod
    async def fetch_rows(self, table: str) -> RowSet:
        """Return every row of ``table``.

        Raises:
            FetchFailure: If the rows cannot be retrieved
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open resources."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
