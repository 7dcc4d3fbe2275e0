"""Date and time coercion for report header fields.

Report forms print the UTC date and time in a handful of layouts. These
converters accept the known ones and raise :class:`FieldParseError` for
anything else, including impossible calendar dates such as day 32.
Slash/dot/dash dates are read day-first.

All functions are pure -- no guessing, no side effects.
"""

from __future__ import annotations

import re
from datetime import date, time

from autoland.errors import FieldParseError

# Month abbreviation -> number mapping (case-insensitive)
_MONTH_ABBREV: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

_MIN_YEAR = 1900
_MAX_YEAR = 2100

_PATTERN_YYYY_MM_DD = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_PATTERN_YYYYMMDD = re.compile(r"^(\d{4})(\d{2})(\d{2})$")
_PATTERN_DMY_NUMERIC = re.compile(r"^(\d{1,2})[/.\-](\d{1,2})[/.\-](\d{4}|\d{2})$")
_PATTERN_DD_MON_YYYY = re.compile(
    r"^(\d{1,2})[\s\-]*(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[\s\-]*(\d{4}|\d{2})$",
    re.IGNORECASE,
)

_PATTERN_HH_MM = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(?:Z|UTC)?$", re.IGNORECASE)
_PATTERN_HHMM = re.compile(r"^(\d{2})(\d{2})\s*(?:Z|UTC)?$", re.IGNORECASE)


def _expand_year(raw: str) -> int:
    """Two-digit years are read as 20YY."""
    year = int(raw)
    if len(raw) == 2:
        year += 2000
    return year


def _build_date(field: str, raw: str, year: int, month: int, day: int) -> date:
    if year < _MIN_YEAR or year > _MAX_YEAR:
        raise FieldParseError(field, raw, f"year {year} out of range")
    try:
        return date(year, month, day)
    except ValueError as e:
        raise FieldParseError(field, raw, f"invalid calendar date: {e}") from e


def parse_report_date(value: str, field: str = "date_utc") -> date:
    """Parse a report date string into a :class:`datetime.date`.

    Supported formats:
        - "DD/MM/YYYY", "DD-MM-YYYY", "DD.MM.YYYY" (two-digit years allowed)
        - "YYYY-MM-DD"
        - "YYYYMMDD"
        - "DD MON YYYY", "DDMONYY" (e.g. "30 DEC 2025", "30DEC25")

    Args:
        value: Raw captured text.
        field: Field name used in error messages.

    Returns:
        The calendar date.

    Raises:
        FieldParseError: If the format is unknown or the date does not exist.

    Examples:
        >>> parse_report_date("30/12/2025")
        datetime.date(2025, 12, 30)
        >>> parse_report_date("30DEC25")
        datetime.date(2025, 12, 30)
    """
    s = value.strip()

    m = _PATTERN_YYYY_MM_DD.match(s) or _PATTERN_YYYYMMDD.match(s)
    if m:
        return _build_date(field, value, int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = _PATTERN_DMY_NUMERIC.match(s)
    if m:
        return _build_date(
            field, value, _expand_year(m.group(3)), int(m.group(2)), int(m.group(1))
        )

    m = _PATTERN_DD_MON_YYYY.match(s)
    if m:
        month = _MONTH_ABBREV[m.group(2).lower()]
        return _build_date(field, value, _expand_year(m.group(3)), month, int(m.group(1)))

    raise FieldParseError(field, value, "unrecognized date format")


def parse_report_time(value: str, field: str = "time_utc") -> time:
    """Parse a report time-of-day into a :class:`datetime.time` (minute precision).

    Accepts "HH:MM", "HH:MM:SS" and "HHMM", optionally suffixed with "Z" or
    "UTC". Seconds are dropped.

    Raises:
        FieldParseError: If the format is unknown or the time is out of range.
    """
    s = value.strip()
    m = _PATTERN_HH_MM.match(s) or _PATTERN_HHMM.match(s)
    if not m:
        raise FieldParseError(field, value, "unrecognized time format, expected HH:MM")

    hour = int(m.group(1))
    minute = int(m.group(2))
    if hour > 23 or minute > 59:
        raise FieldParseError(field, value, "time out of range")
    return time(hour, minute)
