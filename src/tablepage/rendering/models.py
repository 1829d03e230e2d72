"""Row set and render result models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from tablepage.exceptions import RowSetError


@dataclass(frozen=True, slots=True)
class RowSet:
    """Ordered, schema-described collection of rows read from one table.

    Rows are positional tuples whose values line up with ``columns``.
    """

    columns: tuple[str, ...]
    rows: tuple[tuple[Any, ...], ...] = ()

    def __post_init__(self) -> None:
        columns = tuple(self.columns)
        rows = tuple(tuple(row) for row in self.rows)

        seen: set[str] = set()
        for name in columns:
            if not isinstance(name, str):
                raise RowSetError(f"Column name must be a string, got {name!r}")
            if name in seen:
                raise RowSetError(f"Duplicate column name: {name!r}")
            seen.add(name)

        for position, row in enumerate(rows):
            if len(row) != len(columns):
                raise RowSetError(
                    f"Row {position} has {len(row)} values, "
                    f"expected {len(columns)}"
                )

        object.__setattr__(self, "columns", columns)
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_records(
        cls,
        columns: Iterable[str],
        records: Iterable[Sequence[Any] | Mapping[str, Any]],
    ) -> RowSet:
        """Build a row set from driver records.

        Mapping records are read by declared column name; any other record
        is treated as a positional sequence.
        """
        columns = tuple(columns)
        rows: list[tuple[Any, ...]] = []
        for record in records:
            if isinstance(record, Mapping):
                missing = [name for name in columns if name not in record]
                if missing:
                    raise RowSetError(f"Record is missing columns: {missing}")
                rows.append(tuple(record[name] for name in columns))
            else:
                rows.append(tuple(record))
        return cls(columns=columns, rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    def records(self) -> Iterator[dict[str, Any]]:
        """Iterate rows as mappings keyed by column name."""
        for row in self.rows:
            yield dict(zip(self.columns, row))


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of rendering a single table."""

    table: str
    document: str | None = None
    message: str | None = None
    cause: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.document is not None

    @classmethod
    def success(cls, table: str, document: str) -> RenderResult:
        return cls(table=table, document=document)

    @classmethod
    def failure(
        cls, table: str, message: str, cause: BaseException | None = None
    ) -> RenderResult:
        return cls(table=table, message=message, cause=cause)
