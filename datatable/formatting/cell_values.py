"""Cell value formatting using Babel.

Default cells print ``str(value)``. A column can opt into a number format:
- Currency formatting ("currency:USD", "currency:EUR", ...)
- Percentage formatting ("percent")
- Fixed decimal places ("decimal:N")
- Integer formatting ("integer")
- Accounting format, negatives in parentheses ("accounting")
"""

from decimal import Decimal, InvalidOperation
from typing import Any, NamedTuple, Optional, Union

from babel.numbers import format_currency, format_decimal, format_percent

from datatable.exceptions import NumberFormatError

_PLAIN_SPECS = ("percent", "integer", "accounting")


def _to_decimal(value: Any) -> Optional[Decimal]:
    """Convert a numeric-looking value to Decimal, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    try:
        if isinstance(value, (int, float)):
            return Decimal(str(value))
        if isinstance(value, str):
            return Decimal(value.strip().replace(",", ""))
    except (InvalidOperation, ValueError):
        return None
    return None


class ColumnFormat(NamedTuple):
    """A parsed column number format, e.g. ("decimal", 2) or ("currency", "USD")."""

    kind: str
    argument: Union[str, int, None] = None


def parse_format_spec(format_spec: str) -> ColumnFormat:
    """Parse a column number format.

    Raises:
        NumberFormatError: If the format is unknown or its argument is invalid
    """
    spec = format_spec.strip().lower()
    kind, _, argument = spec.partition(":")
    argument = argument.strip()

    if kind == "currency":
        if len(argument) != 3 or not argument.isalpha():
            raise NumberFormatError(
                f"Invalid currency code: {argument.upper()}",
                details={"format_spec": format_spec},
            )
        return ColumnFormat("currency", argument.upper())

    if kind == "decimal":
        if not argument.isdigit():
            raise NumberFormatError(
                f"Invalid decimal format: {format_spec}",
                details={"format_spec": format_spec},
            )
        return ColumnFormat("decimal", int(argument))

    if spec in _PLAIN_SPECS:
        return ColumnFormat(spec)

    raise NumberFormatError(
        f"Unknown format specification: {format_spec}",
        details={"format_spec": format_spec},
    )


def _apply_format(numeric_value: Decimal, column_format: ColumnFormat, locale: str) -> str:
    kind, argument = column_format

    if kind == "currency":
        return format_currency(numeric_value, argument, locale=locale)
    if kind == "percent":
        return format_percent(numeric_value, locale=locale)
    if kind == "decimal":
        pattern = f"#,##0.{'0' * argument}" if argument > 0 else "#,##0"
        return format_decimal(numeric_value, format=pattern, locale=locale)
    if kind == "integer":
        return format_decimal(numeric_value, format="#,##0", locale=locale)

    # accounting
    formatted = format_decimal(abs(numeric_value), format="#,##0.00", locale=locale)
    return f"({formatted})" if numeric_value < 0 else formatted


def format_cell_value(value: Any, format_spec: Optional[str] = None, locale: str = "en_US") -> str:
    """Format a row field value for output inside a cell.

    Args:
        value: Field value read from the row
        format_spec: Optional number format (see module docstring)
        locale: Babel locale for number formats

    Returns:
        Text to place inside the cell; None renders as an empty string and
        non-numeric values ignore ``format_spec``

    Raises:
        NumberFormatError: If format_spec is invalid or formatting fails
    """
    if value is None:
        return ""

    if not format_spec:
        return str(value)

    column_format = parse_format_spec(format_spec)

    numeric_value = _to_decimal(value)
    if numeric_value is None:
        return str(value)

    try:
        return _apply_format(numeric_value, column_format, locale)
    except Exception as e:
        raise NumberFormatError(
            f"Error formatting value {value} with format {format_spec}: {e}",
            details={"format_spec": format_spec},
        ) from e


def validate_format_spec(format_spec: Optional[str]) -> bool:
    """True if ``format_spec`` is empty or parses as a column format."""
    if not format_spec:
        return True
    try:
        parse_format_spec(format_spec)
    except NumberFormatError:
        return False
    return True
