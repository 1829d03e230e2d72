"""Formatter protocol for table outputs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .models import RenderResult, RowSet


class FormatterProtocol(Protocol):
    def format_table(self, table: str, rowset: RowSet) -> str:
        """Format a row set as a document fragment."""
        ...

    def format_failure(self, result: RenderResult) -> str:
        """Format a failed render as a document fragment."""
        ...

    def document(self, fragments: Sequence[str], title: str | None = None) -> str:
        """Join fragments into a complete document."""
        ...
