"""PostgreSQL data source."""

from __future__ import annotations

import asyncio
from typing import Optional

import asyncpg

from tablepage.config.logging import get_logger
from tablepage.exceptions import FetchFailure, RowSetError
from tablepage.rendering.models import RowSet

from .base import BaseDataSource, select_all

logger = get_logger(__name__)

DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class PostgresDataSource(BaseDataSource):
    """Reads tables from PostgreSQL through an asyncpg pool."""

    def __init__(self, connection_string: str, timeout: float = 30.0):
        self.connection_string = connection_string
        self.timeout = timeout
        self._pool: Optional[asyncpg.Pool] = None

    async def get_pool(self) -> asyncpg.Pool:
        """Get or create connection pool."""
        if self._pool is None:
            logger.debug("datasource.postgres.pool")
            self._pool = await asyncpg.create_pool(
                self.connection_string,
                min_size=1,
                max_size=10,
                timeout=self.timeout,
            )
        return self._pool

    async def close(self):
        """Close the connection pool."""
        if self._pool:
            await self._pool.close()
            self._pool = None

    async def fetch_rows(self, table: str) -> RowSet:
        """Read every row of ``table``.

        The query runs in a transaction that is always rolled back so nothing
        is persisted. Column names come from the prepared statement, which
        keeps the header available for empty tables.
        """
        query = select_all(table)
        try:
            pool = await self.get_pool()
            async with pool.acquire() as conn:
                transaction = conn.transaction()
                await transaction.start()
                try:
                    statement = await conn.prepare(query)
                    columns = [attr.name for attr in statement.get_attributes()]
                    records = await statement.fetch()
                finally:
                    await transaction.rollback()
        except DRIVER_ERRORS as exc:
            logger.warning("datasource.postgres.error", table=table, error=str(exc))
            raise FetchFailure(table, f"Error fetching data from {table}", exc)

        try:
            return RowSet.from_records(columns, records)
        except RowSetError as exc:
            raise FetchFailure(table, f"Invalid result for {table}", exc)
