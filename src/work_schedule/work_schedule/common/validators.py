from __future__ import annotations

from ..core.constants import MAX_YEAR, MIN_YEAR
from ..core.exceptions import InvalidArgument


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field_name} is required")
    return value.strip()


def parse_month_key(value: str, field_name: str = "month") -> tuple[int, int]:
    """Validate a ``YYYY-MM`` key and return ``(year, month)``.

    The month part may be one or two digits; both parts must be plain
    non-negative integers.
    """

    value = require_non_empty(value, field_name)
    parts = value.split("-")
    if len(parts) != 2:
        raise InvalidArgument(f"{field_name} must look like YYYY-MM, got {value!r}")

    y_str, m_str = parts
    if not (y_str.isascii() and m_str.isascii() and y_str.isdigit() and m_str.isdigit()):
        raise InvalidArgument(f"{field_name} must be numeric, got {value!r}")
    if len(m_str) > 2:
        raise InvalidArgument(f"{field_name} must look like YYYY-MM, got {value!r}")

    year = int(y_str)
    month = int(m_str)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidArgument(f"{field_name} year must be between {MIN_YEAR:04d} and {MAX_YEAR}, got {value!r}")
    if not 1 <= month <= 12:
        raise InvalidArgument(f"{field_name} must be between 01 and 12, got {value!r}")
    return year, month


def format_month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"
