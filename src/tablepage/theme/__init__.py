"""Console theming for tablepage."""

from .manager import DEFAULT_THEME, create_console

__all__ = ["DEFAULT_THEME", "create_console"]
