"""Value normalization and format checks for captured report fields.

Integer coercers raise :class:`FieldParseError` so the parser can discard
the value with a warning. Format checks return a bool: registrations,
flight numbers and wind groups that deviate from the nominal shape are
still kept.
"""

from __future__ import annotations

import re

from autoland.errors import FieldParseError

_WHITESPACE_RE = re.compile(r"\s+")

# e.g. "VN-A546", "VN-A6690"
AIRCRAFT_REG_RE = re.compile(r"^[A-Z]{2}-[A-Z0-9]{3,5}$")
# e.g. "VJ442", "VJ1234"
FLIGHT_NUMBER_RE = re.compile(r"^[A-Z0-9]{2}\d{1,4}[A-Z]?$")
# DDD/SS, e.g. "090/05"; "VRB/03" for variable wind
WIND_VELOCITY_RE = re.compile(r"^(?:\d{3}|VRB)/\d{1,3}$")

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
# "28", "-3", "M05" (METAR minus), "28C", "28°C", "28 DEG C"
_TEMPERATURE_RE = re.compile(r"^(M|-|\+)?\s*(\d{1,2})\s*(?:°|DEG)?\s*C?$", re.IGNORECASE)


def normalize_whitespace(value: str) -> str:
    """Collapse every run of whitespace (including line breaks) to one space."""
    return _WHITESPACE_RE.sub(" ", value).strip()


def normalize_identifier(value: str) -> str:
    """Uppercase and drop internal whitespace, e.g. ``"vn - a546"`` -> ``"VN-A546"``."""
    return _WHITESPACE_RE.sub("", value).upper()


def parse_int_field(value: str, field: str) -> int:
    """Parse a plain integer field such as QNH.

    Raises:
        FieldParseError: If *value* is not an integer.
    """
    s = value.strip()
    if not _INTEGER_RE.match(s):
        raise FieldParseError(field, value, "not an integer")
    return int(s)


def parse_temperature(value: str, field: str = "temperature") -> int:
    """Parse a temperature in degrees Celsius.

    Accepts an optional sign or METAR-style ``M`` prefix and a trailing
    ``C``/``°C`` unit.

    Raises:
        FieldParseError: If *value* is not a temperature.
    """
    m = _TEMPERATURE_RE.match(value.strip())
    if not m:
        raise FieldParseError(field, value, "not a temperature")
    magnitude = int(m.group(2))
    if m.group(1) in {"M", "m", "-"}:
        return -magnitude
    return magnitude


def is_valid_aircraft_reg(reg: str) -> bool:
    """Registration shape: two-letter prefix, dash, alphanumeric suffix."""
    return bool(AIRCRAFT_REG_RE.match(reg))


def is_valid_flight_number(flight_number: str) -> bool:
    """Flight number shape: two-character airline designator plus 1-4 digits."""
    return bool(FLIGHT_NUMBER_RE.match(flight_number))


def is_valid_wind_velocity(wind: str) -> bool:
    return bool(WIND_VELOCITY_RE.match(wind))
