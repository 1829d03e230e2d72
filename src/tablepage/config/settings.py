"""Configuration management for tablepage."""

import os
from typing import Optional

from tablepage.exceptions import ConfigurationError

DEFAULT_TITLE = "Database tables"


class Config:
    """Configuration read from the environment."""

    def __init__(self):
        self.database_url = self._get_database_url()
        self.tables = self._get_tables()
        self.title = os.getenv("TABLEPAGE_TITLE") or DEFAULT_TITLE
        self.log_level = os.getenv("TABLEPAGE_LOG_LEVEL", "WARNING")

    def _get_database_url(self) -> Optional[str]:
        """Get database URL from environment."""
        return os.getenv("DATABASE_URL") or None

    def _get_tables(self) -> list[str]:
        """Get the default table list from environment."""
        raw = os.getenv("TABLEPAGE_TABLES", "")
        return [name.strip() for name in raw.split(",") if name.strip()]

    def validate(self):
        """Validate that necessary configuration is present."""
        if not self.database_url:
            raise ConfigurationError(
                "No database URL provided. Set DATABASE_URL or use --db."
            )


def get_config() -> Config:
    """Return configuration for the current environment."""
    return Config()
