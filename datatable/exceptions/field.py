"""Missing row field exception."""
from typing import List, Optional

from datatable.exceptions.base import ResourceNotFoundError


class MissingFieldError(ResourceNotFoundError):
    """Raised when a column or action placeholder references a field the row lacks."""

    def __init__(self, field: str, available_fields: Optional[List[str]] = None):
        """
        Args:
            field: Name of the field that was requested
            available_fields: Fields the row does expose, when they can be listed
        """
        available_text = ""
        if available_fields:
            available_text = f" Available fields: {', '.join(available_fields)}."

        super().__init__(
            code="FIELD_NOT_FOUND",
            message=f"Field '{field}' not found on row.{available_text}",
            details={"field": field, "available_fields": available_fields or []},
        )
        self.field = field
        self.available_fields = available_fields or []
