"""Coercion of captured report text into typed values.

Re-exports key transform functions for convenient imports:
    from autoland.transforms import parse_report_date, parse_report_time
    from autoland.transforms import parse_int_field, parse_temperature
    from autoland.transforms import normalize_whitespace, normalize_identifier
"""

from autoland.transforms.dates import parse_report_date, parse_report_time
from autoland.transforms.values import (
    is_valid_aircraft_reg,
    is_valid_flight_number,
    is_valid_wind_velocity,
    normalize_identifier,
    normalize_whitespace,
    parse_int_field,
    parse_temperature,
)

__all__ = [
    "parse_report_date",
    "parse_report_time",
    "parse_int_field",
    "parse_temperature",
    "normalize_whitespace",
    "normalize_identifier",
    "is_valid_aircraft_reg",
    "is_valid_flight_number",
    "is_valid_wind_velocity",
]
