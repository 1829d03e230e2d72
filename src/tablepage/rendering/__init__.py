"""Table rendering primitives."""

from .cells import cell_text, escape, format_cell
from .html_renderer import HtmlTableFormatter
from .models import RenderResult, RowSet
from .renderer import PageResult, RowSetProvider, TableRenderer, render_page

__all__ = [
    "HtmlTableFormatter",
    "PageResult",
    "RenderResult",
    "RowSet",
    "RowSetProvider",
    "TableRenderer",
    "cell_text",
    "escape",
    "format_cell",
    "render_page",
]
