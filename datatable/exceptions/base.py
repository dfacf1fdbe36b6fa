"""Base exception classes for the datatable library.

Every error carries a machine-readable ``code``, a human-readable ``message``
and an optional ``details`` dictionary so callers can react to failures
without parsing message text.
"""

from typing import Any, Dict, Optional


class DatatableError(Exception):
    """Root of all datatable errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Args:
            code: Machine-readable error code (e.g. "FIELD_NOT_FOUND")
            message: Human-readable description of the error
            details: Optional structured context for the error
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a plain dictionary."""
        return {"code": self.code, "message": self.message, "details": self.details}


class ValidationError(DatatableError):
    """Raised when caller-supplied values fail validation."""

    pass


class ConfigurationError(DatatableError):
    """Raised when the renderer is used without the setup it needs."""

    pass


class ResourceNotFoundError(DatatableError):
    """Raised when a referenced resource does not exist."""

    pass
