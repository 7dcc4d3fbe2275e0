"""Pydantic data models shared across the autoland pipeline.

All models are re-exported here for convenient imports:
    from autoland.models import AutolandRecord, ParseOutcome, ProcessingOutcome
"""

from autoland.models.extraction import (
    EXTRACTION_BACKEND,
    ExtractedText,
    ExtractionErrorKind,
    ExtractionMetadata,
)
from autoland.models.fleet import AircraftCompliance, ComplianceStatus, FleetSummary
from autoland.models.processing import (
    AttemptTrace,
    CostMetrics,
    CostSavingsSummary,
    ProcessingOutcome,
)
from autoland.models.report import (
    AutolandRecord,
    LandingResult,
    ParsedFields,
    ParseOutcome,
    combine_utc,
)

__all__ = [
    # extraction
    "EXTRACTION_BACKEND",
    "ExtractionErrorKind",
    "ExtractionMetadata",
    "ExtractedText",
    # report
    "LandingResult",
    "AutolandRecord",
    "ParsedFields",
    "ParseOutcome",
    "combine_utc",
    # processing
    "AttemptTrace",
    "CostMetrics",
    "ProcessingOutcome",
    "CostSavingsSummary",
    # fleet
    "ComplianceStatus",
    "AircraftCompliance",
    "FleetSummary",
]
