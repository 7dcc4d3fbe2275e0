"""Orchestrator envelope and cost-accounting models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from autoland.models.extraction import EXTRACTION_BACKEND
from autoland.models.report import AutolandRecord, ParsedFields


class AttemptTrace(BaseModel):
    """Which stages of the single free attempt succeeded."""

    model_config = ConfigDict(frozen=True)

    method: str = EXTRACTION_BACKEND
    extraction_success: bool
    parsing_success: bool


class CostMetrics(BaseModel):
    """Per-document cost bookkeeping.

    Only the free local method is ever used, so ``actual_cost`` is always
    zero and ``cost_saved`` is what a managed extraction call would have cost.
    """

    model_config = ConfigDict(frozen=True)

    free_attempt: bool = True
    cost_saved: float = Field(..., ge=0.0, description="USD not spent on a paid service")
    actual_cost: float = Field(default=0.0, ge=0.0, description="USD actually spent")


class ProcessingOutcome(BaseModel):
    """Unified result of extracting and parsing one PDF."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: AutolandRecord | None = None
    fields: ParsedFields = Field(default_factory=ParsedFields)
    method: str = EXTRACTION_BACKEND
    attempts: AttemptTrace
    metrics: CostMetrics
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class CostSavingsSummary(BaseModel):
    """Aggregate cost accounting over a batch of processed PDFs."""

    model_config = ConfigDict(frozen=True)

    total_processed: int = Field(..., ge=0)
    free_success_count: int = Field(..., ge=0)
    free_fail_count: int = Field(..., ge=0)
    free_success_rate: float = Field(..., ge=0.0, le=100.0, description="Percent")
    cost_without_free_method: float = Field(
        ..., ge=0.0, description="USD if every PDF used the paid service"
    )
    actual_cost: float = Field(default=0.0, ge=0.0)
    savings: float = Field(..., ge=0.0)
    savings_percentage: float = Field(..., ge=0.0, le=100.0)
