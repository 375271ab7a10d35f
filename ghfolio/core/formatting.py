"""Locale-aware display formatting for dates and counters.

Both helpers are total: a value that cannot be formatted degrades to a plain
string instead of raising, so a single odd record never breaks a render.

Example:
    ```python
    from ghfolio.core.formatting import format_date, format_compact_number

    format_date("2024-03-05T12:00:00Z", locale="pt_BR")  # "5 de mar. de 2024"
    format_compact_number(1500, locale="pt_BR")          # "1,5 mil"
    ```
"""
from __future__ import annotations
from datetime import date, datetime, time, timezone
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Any

from babel.dates import format_skeleton
from babel.numbers import format_compact_decimal

DEFAULT_LOCALE = "en_US"
# day, abbreviated month, year in whatever order the locale prefers
DATE_SKELETON = "yMMMd"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a GitHub ISO-8601 timestamp (``Z`` suffix allowed) into an aware datetime.

    Returns None when the value is missing or not a valid timestamp.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def format_date(timestamp: Any, locale: str = DEFAULT_LOCALE) -> str:
    """Render `timestamp` as a short localized date (day, abbreviated month, year).

    Args:
        timestamp: ISO-8601 string, `datetime` or `date`.
        locale: Babel locale identifier.

    Returns:
        The formatted date, or an empty string on any failure.
    """
    try:
        if isinstance(timestamp, date) and not isinstance(timestamp, datetime):
            day = timestamp
        else:
            parsed = parse_timestamp(timestamp)
            if parsed is None:
                return ""
            day = parsed.date()
        return format_skeleton(DATE_SKELETON, datetime.combine(day, time()), locale=locale)
    except Exception:
        return ""


def _carry_unit(value: Any) -> Any:
    """Bump a value that rounds to 1000 of a compact unit up to the next unit.

    Babel would print 999950 as "1000K"; this makes it "1M".
    """
    number = Decimal(str(value))
    magnitude = abs(number)
    if magnitude < 1000:
        return value
    unit = Decimal(10) ** (magnitude.adjusted() // 3 * 3)
    scaled = (magnitude / unit).quantize(Decimal("0.1"), rounding=ROUND_HALF_EVEN)
    if scaled >= 1000:
        return (unit * 1000).copy_sign(number)
    return value


def format_compact_number(value: Any, locale: str = DEFAULT_LOCALE) -> str:
    """Render `value` in compact notation with at most one fraction digit.

    Args:
        value: Integer-like counter (stars, forks, ...).
        locale: Babel locale identifier.

    Returns:
        e.g. ``"1.5K"`` (en_US) or ``"1,5 mil"`` (pt_BR); ``str(value)`` on failure.
    """
    try:
        return format_compact_decimal(_carry_unit(value), format_type="short", locale=locale, fraction_digits=1)
    except Exception:
        return str(value)
