"""Runtime settings loaded from the environment.

All values can be overridden with ``AUTOLAND_``-prefixed environment
variables or a local ``.env`` file, e.g. ``AUTOLAND_MIN_TEXT_LENGTH=80``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AutolandSettings(BaseSettings):
    """Tunable thresholds for extraction, cost accounting and fleet status."""

    min_text_length: int = Field(
        default=50, ge=0, description="Minimum stripped text length for a viable extraction"
    )
    viability_tokens: list[str] = Field(
        default_factory=lambda: ["AUTOLAND", "REPORT NO", "A/C REG", "FLT NO"],
        description="At least one must appear in the text for extraction to be viable",
    )
    paid_cost_per_pdf: float = Field(
        default=0.015, ge=0.0, description="USD a managed document-extraction call would cost"
    )
    required_interval_days: int = Field(
        default=30, ge=1, description="Days allowed between successful autolands"
    )
    due_soon_threshold_days: int = Field(
        default=7, ge=0, description="Days remaining at or below which an aircraft is DUE_SOON"
    )
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="AUTOLAND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> AutolandSettings:
    """Return the process-wide settings instance."""
    return AutolandSettings()
