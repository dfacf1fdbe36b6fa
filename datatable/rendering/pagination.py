"""Running row index and footer summary."""

from dataclasses import dataclass

from datatable.data.datasets import Dataset


@dataclass(frozen=True)
class FooterSummary:
    """Range of rows shown on the current page out of the total."""

    min: int
    max: int
    total: int

    @property
    def text(self) -> str:
        return f"{self.min} - {self.max} / {self.total}"


def footer_summary(dataset: Dataset) -> FooterSummary:
    """
    Compute the "min - max / total" footer figures.

    Args:
        dataset: Dataset being rendered

    Returns:
        FooterSummary where, for page p of size n over t rows,
        min = 1 + (p - 1) * n and max = min(t, p * n). Unpaginated data
        reports 1 - count / count.
    """
    if not dataset.is_paginated():
        count = dataset.count()
        return FooterSummary(min=1, max=count, total=count)

    page = dataset.current_page()
    per_page = dataset.per_page()
    total = dataset.total()
    return FooterSummary(
        min=1 + (page - 1) * per_page,
        max=min(total, page * per_page),
        total=total,
    )


class PaginationCounter:
    """Running 1-based row index that continues across pages.

    ``init`` positions the counter just before the first row of the current
    page; ``next`` is called once per body row, before its cells render.
    """

    def __init__(self):
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def init(self, dataset: Dataset) -> int:
        if dataset.is_paginated():
            self._current = (dataset.current_page() - 1) * dataset.per_page()
        else:
            self._current = 0
        return self._current

    def next(self) -> int:
        self._current += 1
        return self._current
