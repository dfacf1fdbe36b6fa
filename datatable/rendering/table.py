"""Table rendering orchestrator."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from datatable.data.datasets import PAGINATED_METHODS, UNPAGINATED_METHODS, Dataset
from datatable.data.rows import as_row
from datatable.exceptions import InvalidConfigurationError
from datatable.formatting.attributes import format_attributes
from datatable.logger import Logger, session_logger
from datatable.rendering.actions import ActionLinkBuilder
from datatable.rendering.cells import CellRenderer, ColumnRenderer
from datatable.rendering.pagination import PaginationCounter, footer_summary
from datatable.validation.models import ActionLike, ActionSpec, TableOptions, coerce_actions


@dataclass
class RenderContext:
    """Per-call state handed to cell renderers.

    Created fresh by every render call and discarded afterwards, so a single
    TableRenderer can serve concurrent callers.
    """

    actions: Tuple[ActionSpec, ...] = ()
    action_builder: ActionLinkBuilder = field(default_factory=ActionLinkBuilder)
    counter: PaginationCounter = field(default_factory=PaginationCounter)

    @property
    def row_index(self) -> int:
        """1-based index of the row being rendered, continuing across pages."""
        return self.counter.current


class TableRenderer:
    """Renders a Dataset to an HTML <table> fragment.

    The renderer only holds configuration. Dataset, columns and actions are
    passed to every call, so one instance can be reused freely.
    """

    def __init__(
        self,
        options: Optional[TableOptions] = None,
        custom_renderers: Optional[Mapping[str, ColumnRenderer]] = None,
        logger: Optional[Logger] = None,
        action_builder: Optional[ActionLinkBuilder] = None,
    ):
        """
        Initialize the table renderer.

        Args:
            options: Markup and formatting options (defaults from environment)
            custom_renderers: Column name -> ColumnRenderer overrides
            logger: Logger instance (shared console logger if None)
            action_builder: Builder for the "actions" column
        """
        self.options = options or TableOptions.from_env()
        self.logger = logger or session_logger
        self.action_builder = action_builder or ActionLinkBuilder()
        self.cells = CellRenderer(
            custom_renderers=custom_renderers,
            column_formats=self.options.column_formats,
            locale=self.options.locale,
        )

    def render(
        self,
        dataset: Dataset,
        columns: Sequence[str],
        actions: Optional[Iterable] = None,
    ) -> str:
        """
        Render the complete table followed by pagination links.

        Args:
            dataset: Rows to render, paginated or not
            columns: Column names, in display order
            actions: Action specs for the "actions" column

        Returns:
            HTML fragment

        Raises:
            InvalidConfigurationError: If dataset, columns or actions are unusable
            MissingFieldError: If a row lacks a field a column or action needs
        """
        dataset, columns, action_specs = self._prepare(dataset, columns, actions)

        fragments = [
            self.open(),
            self.table_head(columns),
            self.table_body(dataset, columns, action_specs),
            self.table_foot(dataset),
            self.close(),
        ]
        links = self.links(dataset)
        if links:
            fragments.append(links)

        self.logger.debug(
            f"Rendered table with {len(dataset.rows())} rows",
            columns=len(columns),
            actions=len(action_specs),
            paginated=dataset.is_paginated(),
        )
        return "\n".join(fragments)

    def open(self, attributes: Optional[Mapping[Any, Any]] = None) -> str:
        """Opening <table> tag; uses the configured attributes when none are given."""
        if attributes is None:
            attributes = self.options.table_attributes
        return f"<table{format_attributes(attributes)}>"

    def table_head(self, columns: Sequence[str]) -> str:
        columns = self._validate_columns(columns)
        cells = "".join(self.cells.render_header(column) for column in columns)
        return f"<thead>\n<tr>\n{cells}</tr>\n</thead>"

    def table_body(
        self,
        dataset: Dataset,
        columns: Sequence[str],
        actions: Optional[Iterable] = None,
    ) -> str:
        """
        Body rows, one <tr> per record of the current page.

        The running row index is advanced before each row's cells render.
        """
        dataset, columns, action_specs = self._prepare(dataset, columns, actions)

        context = RenderContext(actions=action_specs, action_builder=self.action_builder)
        context.counter.init(dataset)

        rows: List[str] = []
        for record in dataset.rows():
            row = as_row(record)
            context.counter.next()
            cells = "".join(self.cells.render_cell(column, row, context) for column in columns)
            rows.append(f"<tr>\n{cells}</tr>\n")

        return "<tbody>\n" + "".join(rows) + "</tbody>"

    def table_foot(self, dataset: Dataset) -> str:
        summary = footer_summary(self._validate_dataset(dataset))
        return (
            "<tfoot>\n"
            '<tr class="active">\n'
            f'<td colspan="100%" class="text-center">{summary.text}</td>\n'
            "</tr>\n"
            "</tfoot>"
        )

    def close(self) -> str:
        return "</table>"

    def links(self, dataset: Dataset) -> str:
        """Pagination links wrapped in a <div>; empty for unpaginated data."""
        dataset = self._validate_dataset(dataset)
        if not dataset.is_paginated():
            return ""

        css_class = self.options.links_class
        class_attribute = f' class="{css_class}"' if css_class else ""
        return f"<div{class_attribute}>{dataset.pagination_links_markup()}</div>"

    def _prepare(
        self, dataset: Dataset, columns: Sequence[str], actions: Optional[Iterable]
    ) -> Tuple[Dataset, Tuple[str, ...], Tuple[ActionSpec, ...]]:
        dataset = self._validate_dataset(dataset)
        columns = self._validate_columns(columns)

        if isinstance(actions, (str, bytes)) or (
            actions is not None and not isinstance(actions, Iterable)
        ):
            raise InvalidConfigurationError(
                "Actions must be a sequence of action specs",
                details={"actions_type": type(actions).__name__},
            )
        return dataset, columns, coerce_actions(actions)

    @staticmethod
    def _validate_dataset(dataset: Dataset) -> Dataset:
        if dataset is None:
            raise InvalidConfigurationError("No dataset given to render")

        dataset_type = type(dataset).__name__
        if not callable(getattr(dataset, "is_paginated", None)):
            raise InvalidConfigurationError(
                f"Object of type {dataset_type} does not implement the Dataset interface",
                details={"dataset_type": dataset_type, "missing": ["is_paginated"]},
            )

        # count() is only part of the unpaginated contract, links only of the paginated one
        if dataset.is_paginated():
            required = PAGINATED_METHODS
        else:
            required = UNPAGINATED_METHODS
        missing = [name for name in required if not callable(getattr(dataset, name, None))]
        if missing:
            raise InvalidConfigurationError(
                f"Object of type {dataset_type} does not implement the Dataset interface",
                details={"dataset_type": dataset_type, "missing": missing},
            )
        return dataset

    @staticmethod
    def _validate_columns(columns: Sequence[str]) -> Tuple[str, ...]:
        if columns is None:
            raise InvalidConfigurationError("No columns given to render")
        if isinstance(columns, (str, bytes)) or not isinstance(columns, Iterable):
            raise InvalidConfigurationError(
                "Columns must be a sequence of column names",
                details={"columns_type": type(columns).__name__},
            )

        columns = tuple(columns)
        invalid = [column for column in columns if not isinstance(column, str)]
        if invalid:
            raise InvalidConfigurationError(
                f"Column names must be strings, got {invalid!r}",
                details={"invalid_columns": [repr(column) for column in invalid]},
            )
        return columns


def render_table(
    dataset: Dataset,
    columns: Sequence[str],
    actions: Optional[Iterable[ActionLike]] = None,
    options: Optional[TableOptions] = None,
    custom_renderers: Optional[Mapping[str, ColumnRenderer]] = None,
) -> str:
    """Render ``dataset`` with a fresh TableRenderer."""
    renderer = TableRenderer(options=options, custom_renderers=custom_renderers)
    return renderer.render(dataset, columns, actions)
