"""Row and dataset abstractions consumed by the renderer."""

from datatable.data.rows import AttributeRow, MappingRow, Row, as_row
from datatable.data.datasets import Dataset, PageSlice, RowList

__all__ = [
    "Row",
    "MappingRow",
    "AttributeRow",
    "as_row",
    "Dataset",
    "RowList",
    "PageSlice",
]
