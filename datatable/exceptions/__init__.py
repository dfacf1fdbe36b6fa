"""Custom exceptions for the datatable rendering pipeline.

All exceptions carry a ``code``, a ``message`` and ``details`` so that callers
can branch on the failure kind.
"""

from datatable.exceptions.base import (
    DatatableError,
    ValidationError,
    ConfigurationError,
    ResourceNotFoundError,
)
from datatable.exceptions.field import MissingFieldError
from datatable.exceptions.configuration import (
    InvalidConfigurationError,
    InvalidActionError,
    NumberFormatError,
)

__all__ = [
    # Base exceptions
    "DatatableError",
    "ValidationError",
    "ConfigurationError",
    "ResourceNotFoundError",
    # Specific exceptions
    "MissingFieldError",
    "InvalidConfigurationError",
    "InvalidActionError",
    "NumberFormatError",
]
