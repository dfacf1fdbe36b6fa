"""Centralized configuration documentation and defaults for datatable.

This module provides an overview of all configuration options and their
environment variable mappings.
"""

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Markup
# ------
# DATATABLE_TABLE_CLASS: class attribute of the opening <table> tag (default: table)
#   An empty value renders <table> with no attributes.
#
# DATATABLE_LINKS_CLASS: class attribute of the <div> wrapping pagination links
#   (default: unset, the <div> is rendered without a class)
#
# Formatting
# ----------
# DATATABLE_LOCALE: Babel locale used for per-column number formats (default: en_US)
#
# Logging
# -------
# DATATABLE_LOG_LEVEL: Logging verbosity of the shared console logger (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_TABLE_CLASS = "table"
DEFAULT_LINKS_CLASS = None
DEFAULT_LOCALE = "en_US"
DEFAULT_LOG_LEVEL = "INFO"

# =============================================================================
# CONFIGURATION HELPER FUNCTIONS
# =============================================================================


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Returns:
        Dictionary with current configuration values
    """
    from datatable.config import Config

    return {
        "table_class": Config.get_table_class(),
        "links_class": Config.get_links_class(),
        "locale": Config.get_locale(),
        "log_level": Config.get_log_level(),
    }
