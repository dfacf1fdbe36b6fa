"""Dataset protocol and reference implementations.

The renderer only reads from a dataset; building pages (slicing, counting,
producing pagination-link markup) is the caller's job. ``RowList`` and
``PageSlice`` are small value types for callers that do not already have an
object with this shape.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence, Tuple, runtime_checkable

# Methods a dataset must provide in each mode, besides is_paginated()
UNPAGINATED_METHODS = ("rows", "count")
PAGINATED_METHODS = ("current_page", "per_page", "total", "rows", "pagination_links_markup")


@runtime_checkable
class Dataset(Protocol):
    """Paginated or unpaginated ordered collection of records.

    ``count`` is only read from unpaginated datasets and
    ``pagination_links_markup`` only from paginated ones; the renderer checks
    for the methods of the active mode (see UNPAGINATED_METHODS and
    PAGINATED_METHODS).
    """

    def is_paginated(self) -> bool:
        ...

    def current_page(self) -> int:
        ...

    def per_page(self) -> int:
        ...

    def total(self) -> int:
        ...

    def rows(self) -> Sequence[Any]:
        ...

    def count(self) -> int:
        ...

    def pagination_links_markup(self) -> str:
        ...


@dataclass(frozen=True)
class RowList:
    """Unpaginated dataset: every record is rendered on one page."""

    records: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))

    def is_paginated(self) -> bool:
        return False

    def current_page(self) -> int:
        return 1

    def per_page(self) -> int:
        return len(self.records)

    def total(self) -> int:
        return len(self.records)

    def rows(self) -> Sequence[Any]:
        return self.records

    def count(self) -> int:
        return len(self.records)

    def pagination_links_markup(self) -> str:
        return ""


@dataclass(frozen=True)
class PageSlice:
    """One page of a paginated collection.

    Attributes:
        records: Records belonging to the current page only
        page: Current page number (1-based)
        page_size: Maximum number of records per page
        total_count: Number of records across all pages
        links_markup: Pre-rendered pagination links, emitted verbatim
    """

    records: Tuple[Any, ...]
    page: int
    page_size: int
    total_count: int
    links_markup: str = field(default="")

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {self.total_count}")

    @classmethod
    def from_rows(
        cls, records: Sequence[Any], page: int, page_size: int, links_markup: str = ""
    ) -> "PageSlice":
        """Cut page ``page`` out of the full record sequence."""
        if page < 1 or page_size < 1:
            raise ValueError("page and page_size must be >= 1")
        start = (page - 1) * page_size
        return cls(
            records=tuple(records[start:start + page_size]),
            page=page,
            page_size=page_size,
            total_count=len(records),
            links_markup=links_markup,
        )

    def is_paginated(self) -> bool:
        return True

    def current_page(self) -> int:
        return self.page

    def per_page(self) -> int:
        return self.page_size

    def total(self) -> int:
        return self.total_count

    def rows(self) -> Sequence[Any]:
        return self.records

    def count(self) -> int:
        return len(self.records)

    def pagination_links_markup(self) -> str:
        return self.links_markup
