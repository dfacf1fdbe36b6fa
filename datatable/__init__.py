"""Paginated HTML table rendering."""

from datatable.data import AttributeRow, Dataset, MappingRow, PageSlice, Row, RowList, as_row
from datatable.exceptions import (
    DatatableError,
    InvalidActionError,
    InvalidConfigurationError,
    MissingFieldError,
)
from datatable.rendering import (
    ActionLinkBuilder,
    CellRenderer,
    ColumnRenderer,
    PaginationCounter,
    TableRenderer,
    footer_summary,
    render_table,
)
from datatable.validation import ActionSpec, TableOptions

__version__ = "1.0.0"

__all__ = [
    "ActionLinkBuilder",
    "ActionSpec",
    "AttributeRow",
    "CellRenderer",
    "ColumnRenderer",
    "Dataset",
    "DatatableError",
    "InvalidActionError",
    "InvalidConfigurationError",
    "MappingRow",
    "MissingFieldError",
    "PageSlice",
    "PaginationCounter",
    "Row",
    "RowList",
    "TableOptions",
    "TableRenderer",
    "as_row",
    "footer_summary",
    "render_table",
]
