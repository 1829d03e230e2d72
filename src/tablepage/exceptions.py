"""Exception types raised by tablepage."""

from __future__ import annotations


class TablePageError(Exception):
    """Base exception for tablepage errors."""


class ConfigurationError(TablePageError):
    """Raised when required configuration is missing or invalid."""


class RowSetError(TablePageError, ValueError):
    """Raised when a row set violates its declared schema."""


class FetchFailure(TablePageError):
    """Row retrieval for a table failed.

    Args:
        table: Identifier of the table that could not be read
        message: Human-readable description of the failure
        cause: Underlying driver or connection error, if any
    """

    def __init__(
        self, table: str, message: str, cause: BaseException | None = None
    ):
        super().__init__(message)
        self.table = table
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message
