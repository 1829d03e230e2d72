"""Cell value conversion and markup escaping."""

from __future__ import annotations

from datetime import date, datetime, time

_ENTITIES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)


def escape(text: str) -> str:
    """Replace the five markup-significant characters with named entities."""
    return text.translate(_ENTITIES)


def cell_text(value: object) -> str:
    """Convert a scalar cell value to its textual form.

    NULL renders as an empty string and binary data uses the PostgreSQL hex
    output format (``\\x`` followed by lowercase hex digits).
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return "\\x" + bytes(value).hex()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def format_cell(value: object) -> str:
    """Convert and escape a value for inclusion in a table cell."""
    return escape(cell_text(value))
