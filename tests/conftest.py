import sqlite3
from pathlib import Path

import pytest

from tablepage.config.logging import setup_logging
from tablepage.exceptions import FetchFailure
from tablepage.rendering.models import RowSet


class StaticSource:
    """Row set provider backed by in-memory row sets."""

    def __init__(self, tables: dict[str, RowSet]):
        self.tables = tables
        self.requested: list[str] = []

    async def fetch_rows(self, table: str) -> RowSet:
        self.requested.append(table)
        if table not in self.tables:
            raise FetchFailure(
                table,
                f"Error fetching data from {table}",
                LookupError(f'relation "{table}" does not exist'),
            )
        return self.tables[table]


@pytest.fixture(autouse=True)
def configure_logging():
    setup_logging("WARNING")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def sqlite_db(temp_dir: Path) -> Path:
    path = temp_dir / "app.db"
    conn = sqlite3.connect(path)
    conn.executescript(
        """
        CREATE TABLE artisan_posts (id INTEGER, title TEXT, body TEXT, image BLOB);
        INSERT INTO artisan_posts VALUES (1, 'Clay pots', '<b>fired</b> & glazed', NULL);
        INSERT INTO artisan_posts VALUES (2, 'Rugs', 'Tom''s "best"', x'00ff');
        CREATE TABLE empty_things (id INTEGER, name TEXT);
        """
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def static_source():
    return StaticSource(
        {
            "people": RowSet(
                columns=("id", "name"),
                rows=((1, "Ada"), (2, "Grace")),
            ),
            "pets": RowSet(
                columns=("pet", "owner_id", "notes"),
                rows=(("cat", 1, None),),
            ),
            "empty": RowSet(columns=("a", "b", "c")),
        }
    )
