"""SQLite data source."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import aiosqlite

from tablepage.config.logging import get_logger
from tablepage.exceptions import FetchFailure, RowSetError
from tablepage.rendering.models import RowSet

from .base import BaseDataSource, select_all

logger = get_logger(__name__)


class SQLiteDataSource(BaseDataSource):
    """Reads tables from a SQLite database file."""

    def __init__(self, db_path: Path | str):
        self.db_path = Path(db_path)
        self._connection: aiosqlite.Connection | None = None

    async def _connect(self) -> aiosqlite.Connection:
        if self._connection is None:
            if not self.db_path.exists():
                raise sqlite3.OperationalError(
                    f"database file not found: {self.db_path}"
                )
            self._connection = await aiosqlite.connect(self.db_path)
        return self._connection

    async def close(self) -> None:
        if self._connection is not None:
            await self._connection.close()
            self._connection = None

    async def fetch_rows(self, table: str) -> RowSet:
        query = select_all(table)
        try:
            conn = await self._connect()
            async with conn.execute(query) as cursor:
                columns = [column[0] for column in cursor.description or ()]
                records = await cursor.fetchall()
        except sqlite3.Error as exc:
            logger.warning("datasource.sqlite.error", table=table, error=str(exc))
            raise FetchFailure(table, f"Error fetching data from {table}", exc)

        try:
            return RowSet.from_records(columns, records)
        except RowSetError as exc:
            raise FetchFailure(table, f"Invalid result for {table}", exc)
