"""Fleet autoland compliance: who is due, who is overdue.

Each aircraft must complete a successful autoland every
``required_interval_days``. From the parsed reports this module derives,
per aircraft, the last successful autoland, the next required date, the
days remaining and a status bucket, plus fleet-wide dashboard counters.

All functions are pure -- ``as_of`` is always passed in, never read from
the clock.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, timedelta

from loguru import logger

from autoland.config import AutolandSettings, get_settings
from autoland.models.fleet import AircraftCompliance, ComplianceStatus, FleetSummary
from autoland.models.report import AutolandRecord, LandingResult


def days_remaining(next_required_date: date, as_of: date) -> int:
    """Whole days from *as_of* until *next_required_date*; negative when past."""
    return (next_required_date - as_of).days


def classify_status(remaining: int | None, due_soon_threshold_days: int) -> ComplianceStatus:
    """Bucket a days-remaining figure.

    ``None`` (no successful autoland on record) and negative values are
    OVERDUE; zero up to the threshold is DUE_SOON.
    """
    if remaining is None or remaining < 0:
        return ComplianceStatus.OVERDUE
    if remaining <= due_soon_threshold_days:
        return ComplianceStatus.DUE_SOON
    return ComplianceStatus.ON_TIME


def compute_fleet_compliance(
    records: Iterable[AutolandRecord],
    as_of: date,
    settings: AutolandSettings | None = None,
) -> list[AircraftCompliance]:
    """Derive the compliance position of every aircraft seen in *records*.

    Only SUCCESSFUL autolands reset the clock. When two successful reports
    share the latest date, the later ``datetime_utc`` wins.

    Args:
        records: Parsed autoland reports, any order.
        as_of: Reference date for ``days_remaining``.
        settings: Optional settings with the interval and due-soon threshold.

    Returns:
        One entry per aircraft, most urgent first (aircraft with no
        successful autoland lead), ties broken by registration.
    """
    settings = settings or get_settings()
    interval = timedelta(days=settings.required_interval_days)

    latest: dict[str, AutolandRecord | None] = {}
    for record in records:
        current = latest.get(record.aircraft_reg)
        if record.result is not LandingResult.SUCCESSFUL:
            latest.setdefault(record.aircraft_reg, None)
            continue
        if current is None or record.datetime_utc > current.datetime_utc:
            latest[record.aircraft_reg] = record

    fleet: list[AircraftCompliance] = []
    for reg, record in latest.items():
        if record is None:
            fleet.append(
                AircraftCompliance(aircraft_reg=reg, status=ComplianceStatus.OVERDUE)
            )
            continue

        next_required = record.date_utc + interval
        remaining = days_remaining(next_required, as_of)
        fleet.append(
            AircraftCompliance(
                aircraft_reg=reg,
                last_autoland_date=record.date_utc,
                last_autoland_report=record.report_number,
                next_required_date=next_required,
                days_remaining=remaining,
                status=classify_status(remaining, settings.due_soon_threshold_days),
            )
        )

    fleet.sort(
        key=lambda a: (
            a.days_remaining is not None,
            a.days_remaining if a.days_remaining is not None else 0,
            a.aircraft_reg,
        )
    )
    logger.info(
        "Computed compliance for {n} aircraft as of {as_of}",
        n=len(fleet),
        as_of=as_of.isoformat(),
    )
    return fleet


def summarize_fleet(
    compliance: Iterable[AircraftCompliance],
    records: Iterable[AutolandRecord],
    as_of: date,
    window_days: int = 30,
) -> FleetSummary:
    """Dashboard counters for the fleet.

    ``success_rate`` covers reports dated within ``window_days`` before
    *as_of* (inclusive) and is 0.0 when there are none.
    """
    compliance = list(compliance)
    window_start = as_of - timedelta(days=window_days)
    recent = [r for r in records if window_start <= r.date_utc <= as_of]
    successful = sum(1 for r in recent if r.result is LandingResult.SUCCESSFUL)

    def _count(status: ComplianceStatus) -> int:
        return sum(1 for a in compliance if a.status is status)

    return FleetSummary(
        total_aircraft=len(compliance),
        overdue_count=_count(ComplianceStatus.OVERDUE),
        due_soon_count=_count(ComplianceStatus.DUE_SOON),
        on_time_count=_count(ComplianceStatus.ON_TIME),
        success_rate=(successful / len(recent)) * 100 if recent else 0.0,
    )
