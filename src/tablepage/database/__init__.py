"""Data sources for tablepage."""

from urllib.parse import urlsplit

from tablepage.exceptions import ConfigurationError

from .base import BaseDataSource, quote_identifier
from .postgres import PostgresDataSource
from .sqlite import SQLiteDataSource


def create_data_source(url: str) -> BaseDataSource:
    """Create a data source for a database URL.

    Supports ``postgres://`` / ``postgresql://`` and ``sqlite:///path``.
    """
    scheme = urlsplit(url).scheme.lower()
    if scheme in ("postgres", "postgresql"):
        return PostgresDataSource(url)
    if scheme == "sqlite":
        path = url[len("sqlite:///") :] if url.startswith("sqlite:///") else ""
        if not path:
            raise ConfigurationError(f"SQLite URL must include a path: {url}")
        return SQLiteDataSource(path)
    raise ConfigurationError(f"Unsupported database URL scheme: {scheme or url!r}")


__all__ = [
    "BaseDataSource",
    "PostgresDataSource",
    "SQLiteDataSource",
    "create_data_source",
    "quote_identifier",
]
