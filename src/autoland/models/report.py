"""Autoland report models.

:class:`AutolandRecord` is the fixed-shape record persisted for every
successfully parsed report. Its required members have no defaults, so a
record cannot exist without them. :class:`ParsedFields` carries the same
attributes, all optional, for best-effort inspection of failed parses.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer


class LandingResult(StrEnum):
    """Outcome printed on the report form."""

    SUCCESSFUL = "SUCCESSFUL"
    UNSUCCESSFUL = "UNSUCCESSFUL"


def combine_utc(date_utc: date, time_utc: time) -> datetime:
    """Combine a UTC calendar date and time-of-day into an aware timestamp."""
    return datetime.combine(date_utc, time_utc, tzinfo=UTC)


class AutolandRecord(BaseModel):
    """One autoland event as recovered from a report PDF.

    ``report_number`` is the natural key used for de-duplication by the
    persistence layer. ``visibility_rvr`` stays a string because reports
    print either a distance or the token ``CAVOK``.
    """

    model_config = ConfigDict(frozen=True)

    report_number: str = Field(..., min_length=1, description="Unique report identifier")
    aircraft_reg: str = Field(
        ..., min_length=1, description="Aircraft registration (e.g. 'VN-A546')"
    )
    flight_number: str = Field(..., min_length=1, description="Flight number (e.g. 'VJ442')")
    airport: str | None = Field(default=None, description="Airport code")
    runway: str | None = Field(default=None, description="Runway designator")
    captain: str | None = None
    first_officer: str | None = None
    date_utc: date
    time_utc: time
    wind_velocity: str | None = Field(default=None, description="Direction/speed, DDD/SS")
    td_point: str | None = None
    tracking: str | None = None
    qnh: int | None = Field(default=None, description="Pressure setting in hPa")
    alignment: str | None = None
    speed_control: str | None = None
    landing: str | None = None
    aircraft_dropout: str | None = None
    temperature: int | None = Field(default=None, description="Temperature in degrees Celsius")
    visibility_rvr: str | None = Field(
        default=None, description="Visibility/RVR, numeric or 'CAVOK'"
    )
    other: str | None = None
    result: LandingResult
    reasons: str | None = None
    captain_signature: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def datetime_utc(self) -> datetime:
        """Timestamp of the landing, derived from ``date_utc`` and ``time_utc``."""
        return combine_utc(self.date_utc, self.time_utc)

    @field_serializer("time_utc")
    def _serialize_time(self, value: time) -> str:
        return value.strftime("%H:%M")


class ParsedFields(BaseModel):
    """Every record attribute as far as the parser got, all optional."""

    model_config = ConfigDict(frozen=True)

    report_number: str | None = None
    aircraft_reg: str | None = None
    flight_number: str | None = None
    airport: str | None = None
    runway: str | None = None
    captain: str | None = None
    first_officer: str | None = None
    date_utc: date | None = None
    time_utc: time | None = None
    datetime_utc: datetime | None = None
    wind_velocity: str | None = None
    td_point: str | None = None
    tracking: str | None = None
    qnh: int | None = None
    alignment: str | None = None
    speed_control: str | None = None
    landing: str | None = None
    aircraft_dropout: str | None = None
    temperature: int | None = None
    visibility_rvr: str | None = None
    other: str | None = None
    result: LandingResult | None = None
    reasons: str | None = None
    captain_signature: str | None = None

    @field_serializer("time_utc")
    def _serialize_time(self, value: time | None) -> str | None:
        return value.strftime("%H:%M") if value is not None else None


class ParseOutcome(BaseModel):
    """Result of parsing one report's text.

    ``data`` is set only when every required field was recovered.
    ``errors`` and ``warnings`` are ordered and each entry is prefixed with
    the field or stage it concerns.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: AutolandRecord | None = None
    fields: ParsedFields = Field(default_factory=ParsedFields)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
