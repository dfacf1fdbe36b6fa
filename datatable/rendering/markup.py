"""Default <th>/<td> fragments shared by the cell and action renderers."""

from typing import Any, Optional


def ucfirst(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def _class_attribute(css_class: Optional[str]) -> str:
    if css_class is None:
        return ""
    return f' class="{css_class}"'


def th(content: Any, css_class: Optional[str] = None) -> str:
    """Header cell with the first letter of ``content`` capitalized."""
    return f"<th{_class_attribute(css_class)}>{ucfirst(str(content))}</th>\n"


def td(content: Any, css_class: Optional[str] = None) -> str:
    """Body cell; None renders as an empty cell."""
    text = "" if content is None else str(content)
    return f"<td{_class_attribute(css_class)}>{text}</td>\n"
