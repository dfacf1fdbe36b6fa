"""Environment-backed configuration for datatable.

See ``datatable.config_docs`` for the full list of variables.
"""

import os
from typing import Optional

from datatable.config_docs import (
    DEFAULT_LINKS_CLASS,
    DEFAULT_LOCALE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TABLE_CLASS,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Read-only accessors for DATATABLE_* environment variables."""

    @classmethod
    def get_table_class(cls) -> str:
        """Class attribute for the opening <table> tag."""
        return os.environ.get("DATATABLE_TABLE_CLASS", DEFAULT_TABLE_CLASS)

    @classmethod
    def get_links_class(cls) -> Optional[str]:
        """Class attribute for the pagination links <div>, or None."""
        value = os.environ.get("DATATABLE_LINKS_CLASS")
        if not value:
            return DEFAULT_LINKS_CLASS
        return value

    @classmethod
    def get_locale(cls) -> str:
        """Babel locale used for number formatting."""
        return os.environ.get("DATATABLE_LOCALE") or DEFAULT_LOCALE

    @classmethod
    def get_log_level(cls) -> str:
        """Log level name; unknown values fall back to the default."""
        level = os.environ.get("DATATABLE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if level not in _LOG_LEVELS:
            return DEFAULT_LOG_LEVEL
        return level
