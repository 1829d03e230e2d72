"""Tests for the PostgreSQL data source with a mocked asyncpg pool."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import asyncpg
import pytest

from tablepage.database.postgres import PostgresDataSource
from tablepage.exceptions import FetchFailure


def _mock_pool(columns, records=None, prepare_error=None):
    statement = MagicMock()
    statement.get_attributes.return_value = tuple(
        SimpleNamespace(name=name) for name in columns
    )
    statement.fetch = AsyncMock(return_value=records or [])

    transaction = MagicMock()
    transaction.start = AsyncMock()
    transaction.rollback = AsyncMock()

    conn = MagicMock()
    conn.transaction.return_value = transaction
    conn.prepare = AsyncMock(return_value=statement, side_effect=prepare_error)

    acquire = MagicMock()
    acquire.__aenter__ = AsyncMock(return_value=conn)
    acquire.__aexit__ = AsyncMock(return_value=False)

    pool = MagicMock()
    pool.acquire.return_value = acquire
    pool.close = AsyncMock()
    return pool, conn, transaction


@pytest.mark.asyncio
async def test_fetch_rows_uses_statement_attributes():
    pool, conn, transaction = _mock_pool(
        ["id", "title"], [(1, "Clay pots"), (2, "Rugs")]
    )

    with patch("asyncpg.create_pool", AsyncMock(return_value=pool)) as create_pool:
        source = PostgresDataSource("postgresql://localhost/app")
        rowset = await source.fetch_rows("public.artisan_posts")
        await source.close()

    create_pool.assert_awaited_once()
    conn.prepare.assert_awaited_once_with(
        'SELECT * FROM "public"."artisan_posts"'
    )
    transaction.start.assert_awaited_once()
    transaction.rollback.assert_awaited_once()
    pool.close.assert_awaited_once()
    assert rowset.columns == ("id", "title")
    assert rowset.rows == ((1, "Clay pots"), (2, "Rugs"))


@pytest.mark.asyncio
async def test_fetch_rows_empty_table_keeps_header():
    pool, _, _ = _mock_pool(["id", "title"])

    with patch("asyncpg.create_pool", AsyncMock(return_value=pool)):
        rowset = await PostgresDataSource("postgresql://localhost/app").fetch_rows(
            "artisan_posts"
        )

    assert rowset.columns == ("id", "title")
    assert rowset.rows == ()


@pytest.mark.asyncio
async def test_query_error_becomes_fetch_failure_and_rolls_back():
    error = asyncpg.UndefinedTableError('relation "nope" does not exist')
    pool, _, transaction = _mock_pool([], prepare_error=error)

    with patch("asyncpg.create_pool", AsyncMock(return_value=pool)):
        source = PostgresDataSource("postgresql://localhost/app")
        with pytest.raises(FetchFailure) as exc_info:
            await source.fetch_rows("nope")

    transaction.rollback.assert_awaited_once()
    assert exc_info.value.table == "nope"
    assert exc_info.value.cause is error


@pytest.mark.asyncio
async def test_connection_error_becomes_fetch_failure():
    refused = ConnectionRefusedError("connection refused")

    with patch("asyncpg.create_pool", AsyncMock(side_effect=refused)):
        source = PostgresDataSource("postgresql://localhost/app")
        with pytest.raises(FetchFailure) as exc_info:
            await source.fetch_rows("artisan_posts")

    assert exc_info.value.cause is refused


@pytest.mark.asyncio
async def test_duplicate_result_columns_become_fetch_failure():
    pool, _, _ = _mock_pool(["id", "id"], [(1, 1)])

    with patch("asyncpg.create_pool", AsyncMock(return_value=pool)):
        source = PostgresDataSource("postgresql://localhost/app")
        with pytest.raises(FetchFailure, match="Invalid result"):
            await source.fetch_rows("v_joined")


@pytest.mark.asyncio
async def test_pool_is_reused():
    pool, _, _ = _mock_pool(["id"], [(1,)])

    with patch("asyncpg.create_pool", AsyncMock(return_value=pool)) as create_pool:
        source = PostgresDataSource("postgresql://localhost/app")
        await source.fetch_rows("a")
        await source.fetch_rows("b")

    assert create_pool.await_count == 1
