"""Render database tables as HTML pages."""

__version__ = "0.1.0"
