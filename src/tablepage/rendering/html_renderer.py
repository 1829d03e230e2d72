"""HTML table formatter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .cells import escape, format_cell
from .models import RenderResult, RowSet

TABLE_OPEN = '<table border="1" style="border-collapse: collapse; width: 100%;">'
TABLE_CLOSE = "</table>"


class HtmlTableFormatter:
    """Render row sets as line-oriented HTML tables.

    The header is a single ``<tr>`` line of ``<th>`` cells and every row is a
    single ``<tr>`` line of ``<td>`` cells, in row set order.
    """

    def format_table(self, table: str, rowset: RowSet) -> str:
        lines = [
            f"<h3>{escape(table)}</h3>",
            TABLE_OPEN,
            self.header_line(rowset.columns),
        ]
        lines.extend(self.row_line(row) for row in rowset.rows)
        lines.append(TABLE_CLOSE)
        return "\n".join(lines)

    def header_line(self, columns: Iterable[str]) -> str:
        cells = "".join(f"<th>{escape(name)}</th>" for name in columns)
        return f"<tr>{cells}</tr>"

    def row_line(self, row: Iterable[object]) -> str:
        cells = "".join(f"<td>{format_cell(value)}</td>" for value in row)
        return f"<tr>{cells}</tr>"

    def format_failure(self, result: RenderResult) -> str:
        message = result.message or f"Error fetching data from {result.table}"
        return f"<h3>{escape(message)}</h3>"

    def document(self, fragments: Sequence[str], title: str | None = None) -> str:
        head = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
        ]
        if title:
            head.append(f"<title>{escape(title)}</title>")
        head.extend(["</head>", "<body>"])
        if title:
            head.append(f"<h1>{escape(title)}</h1>")

        body: list[str] = []
        for fragment in fragments:
            body.append(fragment)
            body.append("<br>")

        return "\n".join([*head, *body, "</body>", "</html>"]) + "\n"
