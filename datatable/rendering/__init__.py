"""Table rendering pipeline."""

from datatable.rendering.actions import ActionLinkBuilder
from datatable.rendering.cells import (
    ACTIONS_COLUMN,
    ROW_NUM_COLUMN,
    CellRenderer,
    ColumnRenderer,
    studly_case,
)
from datatable.rendering.markup import td, th
from datatable.rendering.pagination import FooterSummary, PaginationCounter, footer_summary
from datatable.rendering.table import RenderContext, TableRenderer, render_table

__all__ = [
    "ACTIONS_COLUMN",
    "ROW_NUM_COLUMN",
    "ActionLinkBuilder",
    "CellRenderer",
    "ColumnRenderer",
    "FooterSummary",
    "PaginationCounter",
    "RenderContext",
    "TableRenderer",
    "footer_summary",
    "render_table",
    "studly_case",
    "td",
    "th",
]
