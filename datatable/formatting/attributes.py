"""HTML attribute string building."""

from typing import Any, Mapping, Optional, Union

AttributeKey = Union[str, int]


def _is_flag_key(key: Any) -> bool:
    # bool is an int subclass but never a positional index
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def format_attributes(attributes: Optional[Mapping[AttributeKey, Any]]) -> str:
    """Serialize an attribute mapping into an HTML attribute string.

    Entries are emitted in iteration order, each preceded by a single space.
    Non-negative integer keys mark bare flags (``{0: "disabled"}`` gives
    ``' disabled'``); any other key gives ``' key="value"'``.

    Values are NOT escaped. Callers must not pass untrusted text.

    Args:
        attributes: Mapping of attribute name (or flag position) to value

    Returns:
        Attribute string with a leading space per entry, or "" if empty

    Examples:
        >>> format_attributes({"class": "table", 0: "hidden"})
        ' class="table" hidden'
    """
    if not attributes:
        return ""

    parts = []
    for key, value in attributes.items():
        if _is_flag_key(key):
            parts.append(f" {value}")
        else:
            parts.append(f' {key}="{value}"')
    return "".join(parts)
