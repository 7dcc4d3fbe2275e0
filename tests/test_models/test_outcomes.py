"""Tests for extraction, processing and fleet models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from autoland.models import (
    AircraftCompliance,
    AttemptTrace,
    ComplianceStatus,
    CostMetrics,
    ExtractedText,
    ExtractionErrorKind,
    ProcessingOutcome,
)


class TestExtractedText:
    def test_success_has_no_error_message(self) -> None:
        assert ExtractedText(success=True, text="x").error_message is None

    def test_error_message_with_detail(self) -> None:
        extracted = ExtractedText(
            success=False, error=ExtractionErrorKind.ENCRYPTED, detail="document is password protected"
        )
        assert extracted.error_message == "extraction: encrypted: document is password protected"

    def test_error_message_without_detail(self) -> None:
        extracted = ExtractedText(success=False, error=ExtractionErrorKind.EMPTY_OUTPUT)
        assert extracted.error_message == "extraction: empty-output"

    def test_error_kind_values(self) -> None:
        assert {k.value for k in ExtractionErrorKind} == {
            "empty-input",
            "corrupt",
            "encrypted",
            "no-text-stream",
            "empty-output",
        }


class TestProcessingOutcome:
    def test_free_method_defaults(self) -> None:
        outcome = ProcessingOutcome(
            success=False,
            attempts=AttemptTrace(extraction_success=False, parsing_success=False),
            metrics=CostMetrics(cost_saved=0.015),
        )
        assert outcome.method == "pymupdf"
        assert outcome.attempts.method == "pymupdf"
        assert outcome.metrics.free_attempt is True
        assert outcome.metrics.actual_cost == 0.0

    def test_negative_cost_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CostMetrics(cost_saved=-1.0)


class TestAircraftCompliance:
    def test_never_landed(self) -> None:
        entry = AircraftCompliance(aircraft_reg="VN-A546", status=ComplianceStatus.OVERDUE)
        assert entry.last_autoland_date is None
        assert entry.days_remaining is None

    def test_status_values(self) -> None:
        assert [s.value for s in ComplianceStatus] == ["ON_TIME", "DUE_SOON", "OVERDUE"]
