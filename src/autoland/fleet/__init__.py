"""Fleet-level autoland compliance derived from parsed reports."""

from autoland.fleet.compliance import (
    classify_status,
    compute_fleet_compliance,
    days_remaining,
    summarize_fleet,
)

__all__ = [
    "compute_fleet_compliance",
    "summarize_fleet",
    "classify_status",
    "days_remaining",
]
