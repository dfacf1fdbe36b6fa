"""Validated configuration models for table rendering."""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from datatable.config import Config
from datatable.exceptions import InvalidActionError, NumberFormatError
from datatable.formatting.cell_values import parse_format_spec

AttributeKey = Union[int, str]


def _stringify_attributes(value: Any) -> Any:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {key: str(item) for key, item in value.items()}
    return value


class ActionSpec(BaseModel):
    """One link rendered inside the "actions" column.

    Args:
        label: Link text
        href: URL template; the first ``{field}`` placeholder is replaced with
            that field of the row being rendered
        attributes: Extra anchor attributes, in output order. Integer keys
            mark bare flags.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    href: str
    attributes: Dict[AttributeKey, str] = {}

    @field_validator("attributes", mode="before")
    @classmethod
    def coerce_attribute_values(cls, v: Any) -> Any:
        """Accept None and non-string attribute values."""
        return _stringify_attributes(v)


ActionLike = Union[ActionSpec, Tuple[Any, ...], list, Dict[str, Any]]


def _build_action(label: Any, href: Any, attributes: Any, position: int) -> ActionSpec:
    try:
        return ActionSpec(label=label, href=href, attributes=attributes)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise InvalidActionError(
            f"Action at position {position} has invalid {', '.join(fields)}",
            details={"position": position, "fields": fields},
        ) from e


def _coerce_action(action: Any, position: int) -> ActionSpec:
    if isinstance(action, ActionSpec):
        return action

    if isinstance(action, Mapping):
        if "label" not in action or "href" not in action:
            raise InvalidActionError(
                f"Action at position {position} must have 'label' and 'href' keys",
                details={"position": position, "keys": sorted(str(k) for k in action)},
            )
        return _build_action(action["label"], action["href"], action.get("attributes"), position)

    if isinstance(action, (tuple, list)):
        if len(action) not in (2, 3):
            raise InvalidActionError(
                f"Action at position {position} must be (label, href[, attributes]), "
                f"got {len(action)} items",
                details={"position": position},
            )
        attributes = action[2] if len(action) == 3 else None
        return _build_action(action[0], action[1], attributes, position)

    raise InvalidActionError(
        f"Action at position {position} has unsupported type {type(action).__name__}",
        details={"position": position},
    )


def coerce_actions(actions: Optional[Iterable[ActionLike]]) -> Tuple[ActionSpec, ...]:
    """Normalize an action list into a tuple of ActionSpec.

    Accepts ActionSpec instances, ``(label, href[, attributes])`` tuples or
    lists, and dicts with ``label``/``href``/``attributes`` keys.

    Raises:
        InvalidActionError: If an entry cannot be understood
    """
    if actions is None:
        return ()
    return tuple(_coerce_action(action, position) for position, action in enumerate(actions))


class TableOptions(BaseModel):
    """Renderer-level options fixed when a TableRenderer is built.

    Args:
        table_attributes: Attributes of the opening <table> tag
        links_class: Class of the <div> wrapping pagination links
        column_formats: Column name -> number format (see format_cell_value)
        locale: Babel locale for number formats
    """

    model_config = ConfigDict(frozen=True)

    table_attributes: Dict[AttributeKey, str] = {"class": "table"}
    links_class: Optional[str] = None
    column_formats: Dict[str, str] = {}
    locale: str = "en_US"

    @field_validator("table_attributes", mode="before")
    @classmethod
    def coerce_table_attributes(cls, v: Any) -> Any:
        """Accept None (no attributes) and non-string attribute values."""
        return _stringify_attributes(v)

    @field_validator("column_formats")
    @classmethod
    def validate_column_formats(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Reject unknown number formats up front."""
        for column, spec in v.items():
            if not spec:
                continue
            try:
                parse_format_spec(spec)
            except NumberFormatError as e:
                raise NumberFormatError(
                    f"Invalid number format '{spec}' for column '{column}': {e.message}",
                    details={"column": column, "format_spec": spec},
                ) from e
        return v

    @classmethod
    def from_env(cls, **overrides: Any) -> "TableOptions":
        """Build options from DATATABLE_* environment variables plus overrides."""
        table_class = Config.get_table_class()
        values: Dict[str, Any] = {
            "table_attributes": {"class": table_class} if table_class else {},
            "links_class": Config.get_links_class(),
            "locale": Config.get_locale(),
        }
        values.update(overrides)
        return cls(**values)
