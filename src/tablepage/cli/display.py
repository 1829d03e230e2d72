"""Display utilities for the CLI interface."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tablepage.rendering.cells import cell_text
from tablepage.rendering.models import RenderResult, RowSet


class DisplayManager:
    """Manages display formatting and output for the CLI."""

    def __init__(self, console: Console):
        self.console = console

    def show_rowset(self, table_name: str, rowset: RowSet, limit: int = 20):
        """Display a row set in a formatted table."""
        heading = f"{escape(table_name)} ({len(rowset)} rows):"
        self.console.print(f"\n[bold magenta]{heading}[/bold magenta]")

        table = Table(show_header=True, header_style="header")
        for column in rowset.columns:
            table.add_column(Text(column))

        # Cell values are data, never console markup
        for row in rowset.rows[:limit]:
            table.add_row(*[Text(cell_text(value)) for value in row])

        self.console.print(table)

        if len(rowset) > limit:
            self.console.print(
                f"[dim]... and {len(rowset) - limit} more rows[/dim]"
            )

    def show_failure(self, result: RenderResult):
        """Display a failed render."""
        self.show_error(result.message or f"Could not render {result.table}")

    def show_error(self, error_message: str):
        """Display error message."""
        self.console.print(
            f"\n[bold error]Error:[/bold error] {escape(error_message)}",
            highlight=False,
        )
