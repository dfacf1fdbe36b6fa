"""Per-column header and cell rendering.

Each column resolves through a fixed registry keyed by the studly-cased column
name ("row_num" -> "RowNum"). A registered header or cell callable wins;
otherwise the default <th>/<td> markup is used.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Dict, Mapping, Optional

from datatable.data.rows import Row
from datatable.formatting.cell_values import format_cell_value
from datatable.rendering.markup import td, th

if TYPE_CHECKING:
    from datatable.rendering.table import RenderContext

HeaderRenderer = Callable[[], str]
CellRendererFn = Callable[[Row, "RenderContext"], str]

ROW_NUM_COLUMN = "row_num"
ACTIONS_COLUMN = "actions"

_WORD_SEPARATORS = re.compile(r"[-_\s]+")


def studly_case(name: str) -> str:
    """Normalize a column name to its registry key ("created_at" -> "CreatedAt")."""
    return "".join(word[:1].upper() + word[1:] for word in _WORD_SEPARATORS.split(name) if word)


@dataclass(frozen=True)
class ColumnRenderer:
    """Custom markup for one column.

    Either callable may be left out, in which case that side of the column
    falls back to the default <th>/<td>.

    Attributes:
        header: Called with no arguments, returns the full <th> fragment
        cell: Called with the row and the render context, returns the full
            <td> fragment
    """

    header: Optional[HeaderRenderer] = None
    cell: Optional[CellRendererFn] = None


def _row_num_header() -> str:
    return th("#", "small")


def _row_num_cell(row: Row, context: "RenderContext") -> str:
    return td(context.row_index, "small")


def _actions_header() -> str:
    return th("Actions")


def _actions_cell(row: Row, context: "RenderContext") -> str:
    return context.action_builder.render_actions_cell(row, context.actions)


BUILTIN_RENDERERS: Mapping[str, ColumnRenderer] = MappingProxyType(
    {
        studly_case(ROW_NUM_COLUMN): ColumnRenderer(header=_row_num_header, cell=_row_num_cell),
        studly_case(ACTIONS_COLUMN): ColumnRenderer(header=_actions_header, cell=_actions_cell),
    }
)


class CellRenderer:
    """Resolves header and cell markup per column name."""

    def __init__(
        self,
        custom_renderers: Optional[Mapping[str, ColumnRenderer]] = None,
        column_formats: Optional[Mapping[str, str]] = None,
        locale: str = "en_US",
    ):
        """
        Args:
            custom_renderers: Column name -> ColumnRenderer; names are
                normalized with studly_case and override the built-ins
            column_formats: Column name -> number format for default cells
            locale: Babel locale for number formats
        """
        registry: Dict[str, ColumnRenderer] = dict(BUILTIN_RENDERERS)
        for column, renderer in (custom_renderers or {}).items():
            if not isinstance(renderer, ColumnRenderer):
                raise TypeError(
                    f"Renderer for column '{column}' must be a ColumnRenderer, "
                    f"got {type(renderer).__name__}"
                )
            registry[studly_case(column)] = renderer

        self._registry: Mapping[str, ColumnRenderer] = MappingProxyType(registry)
        self._column_formats: Mapping[str, str] = MappingProxyType(dict(column_formats or {}))
        self._locale = locale

    @property
    def registry(self) -> Mapping[str, ColumnRenderer]:
        return self._registry

    def lookup(self, column: str) -> Optional[ColumnRenderer]:
        """Registered renderer for ``column``, if any."""
        return self._registry.get(studly_case(column))

    def render_header(self, column: str) -> str:
        custom = self.lookup(column)
        if custom is not None and custom.header is not None:
            return custom.header()
        return th(column)

    def render_cell(self, column: str, row: Row, context: "RenderContext") -> str:
        """
        Render one body cell.

        Raises:
            MissingFieldError: If the default cell is used and the row lacks
                the column's field
        """
        custom = self.lookup(column)
        if custom is not None and custom.cell is not None:
            return custom.cell(row, context)

        value = row.field(column)
        return td(format_cell_value(value, self._column_formats.get(column), self._locale))
