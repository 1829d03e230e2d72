"""Console theme."""

from rich.console import Console
from rich.theme import Theme

DEFAULT_THEME = Theme(
    {
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "info": "cyan",
        "dim": "dim",
        "header": "bold blue",
    }
)


def create_console(**kwargs) -> Console:
    """Create a rich console using the tablepage theme."""
    kwargs.setdefault("theme", DEFAULT_THEME)
    return Console(**kwargs)
