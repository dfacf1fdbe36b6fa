"""Markup and value formatting helpers."""

from datatable.formatting.attributes import format_attributes
from datatable.formatting.cell_values import (
    ColumnFormat,
    format_cell_value,
    parse_format_spec,
    validate_format_spec,
)

__all__ = [
    "format_attributes",
    "ColumnFormat",
    "format_cell_value",
    "parse_format_spec",
    "validate_format_spec",
]
