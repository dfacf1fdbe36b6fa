"""Validated models for renderer configuration."""

from datatable.validation.models import ActionSpec, TableOptions, coerce_actions

__all__ = [
    "ActionSpec",
    "TableOptions",
    "coerce_actions",
]
