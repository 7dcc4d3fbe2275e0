"""Fleet compliance models: when each aircraft needs its next autoland."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class ComplianceStatus(StrEnum):
    """Where an aircraft sits relative to its next required autoland.

    ON_TIME: More than the due-soon threshold remains.
    DUE_SOON: Within the threshold, not yet past the due date.
    OVERDUE: Past the due date, or no successful autoland on record.
    """

    ON_TIME = "ON_TIME"
    DUE_SOON = "DUE_SOON"
    OVERDUE = "OVERDUE"


class AircraftCompliance(BaseModel):
    """Compliance position of a single aircraft."""

    model_config = ConfigDict(frozen=True)

    aircraft_reg: str = Field(..., min_length=1)
    last_autoland_date: date | None = Field(
        default=None, description="Date of the latest SUCCESSFUL autoland"
    )
    last_autoland_report: str | None = Field(
        default=None, description="Report number of that autoland"
    )
    next_required_date: date | None = None
    days_remaining: int | None = Field(
        default=None, description="Negative when overdue; None if never landed successfully"
    )
    status: ComplianceStatus


class FleetSummary(BaseModel):
    """Dashboard counters over the whole fleet."""

    model_config = ConfigDict(frozen=True)

    total_aircraft: int = Field(..., ge=0)
    overdue_count: int = Field(..., ge=0)
    due_soon_count: int = Field(..., ge=0)
    on_time_count: int = Field(..., ge=0)
    success_rate: float = Field(
        ..., ge=0.0, le=100.0, description="Percent of SUCCESSFUL reports in the window"
    )
