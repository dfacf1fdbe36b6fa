"""Row access.

The renderer reads fields by column name through the ``Row`` protocol. Mappings
and plain objects are adapted with ``as_row`` so callers can pass dicts,
dataclasses, pydantic models or ORM instances unchanged.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, runtime_checkable

from datatable.exceptions import MissingFieldError


@runtime_checkable
class Row(Protocol):
    """A record whose fields can be read by name."""

    def field(self, name: str) -> Any:
        ...

    def has_field(self, name: str) -> bool:
        ...


class MappingRow:
    """Row over a mapping (dict, sqlite3.Row-like, ...)."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping):
        self._data = data

    def field(self, name: str) -> Any:
        if name not in self._data:
            raise MissingFieldError(name, [str(key) for key in self._data.keys()])
        return self._data[name]

    def has_field(self, name: str) -> bool:
        return name in self._data

    def __repr__(self) -> str:
        return f"MappingRow({self._data!r})"


class AttributeRow:
    """Row over an arbitrary object, reading fields as attributes."""

    __slots__ = ("_record",)

    def __init__(self, record: Any):
        self._record = record

    def field(self, name: str) -> Any:
        if not self.has_field(name):
            raise MissingFieldError(name, self._public_attributes())
        return getattr(self._record, name)

    def has_field(self, name: str) -> bool:
        # dunder names are interpreter internals, never row data
        if name.startswith("__") and name.endswith("__"):
            return False
        return hasattr(self._record, name)

    def _public_attributes(self) -> Optional[List[str]]:
        attributes = getattr(self._record, "__dict__", None)
        if attributes is None:
            return None
        return [key for key in attributes if not key.startswith("_")]

    def __repr__(self) -> str:
        return f"AttributeRow({self._record!r})"


def as_row(record: Any) -> Row:
    """Adapt a record to the Row protocol.

    Objects that already implement ``field``/``has_field`` are returned as-is,
    mappings are wrapped in MappingRow and everything else in AttributeRow.
    """
    if isinstance(record, Row):
        return record
    if isinstance(record, Mapping):
        return MappingRow(record)
    return AttributeRow(record)
