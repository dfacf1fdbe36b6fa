"""Render configuration exceptions."""

from typing import Any, Dict, Optional

from datatable.exceptions.base import ConfigurationError, ValidationError


class InvalidConfigurationError(ConfigurationError):
    """Raised when render is invoked with a missing or unusable dataset, column or action list."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_CONFIGURATION", message=message, details=details or {})


class InvalidActionError(ValidationError):
    """Raised when an action specification cannot be understood."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_ACTION", message=message, details=details or {})


class NumberFormatError(ValidationError):
    """Raised when a cell number format is invalid or cannot be applied."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_NUMBER_FORMAT", message=message, details=details or {})
