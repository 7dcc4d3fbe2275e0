"""Cost-savings accounting over a batch of processed reports.

A pure projection over :class:`ProcessingOutcome` values: nothing is
counted globally, callers pass in whatever batch they want summarized.
"""

from __future__ import annotations

from collections.abc import Iterable

from autoland.config import AutolandSettings, get_settings
from autoland.models.processing import CostSavingsSummary, ProcessingOutcome


def calculate_cost_savings(
    outcomes: Iterable[ProcessingOutcome],
    settings: AutolandSettings | None = None,
) -> CostSavingsSummary:
    """Summarize what a batch cost versus sending every PDF to a paid service.

    Every PDF is attempted with the free method only, so the actual cost is
    zero and the savings equal the paid cost of the whole batch.

    Args:
        outcomes: Processed reports, successful or not.
        settings: Optional settings supplying the per-PDF paid cost.

    Returns:
        :class:`CostSavingsSummary`; all zeros for an empty batch.
    """
    settings = settings or get_settings()
    outcomes = list(outcomes)

    total = len(outcomes)
    free_success = sum(1 for o in outcomes if o.success)
    free_fail = total - free_success
    actual_cost = sum(o.metrics.actual_cost for o in outcomes)

    cost_without_free_method = total * settings.paid_cost_per_pdf
    savings = cost_without_free_method - actual_cost

    return CostSavingsSummary(
        total_processed=total,
        free_success_count=free_success,
        free_fail_count=free_fail,
        free_success_rate=(free_success / total) * 100 if total > 0 else 0.0,
        cost_without_free_method=cost_without_free_method,
        actual_cost=actual_cost,
        savings=savings,
        savings_percentage=(
            (savings / cost_without_free_method) * 100 if cost_without_free_method > 0 else 0.0
        ),
    )
