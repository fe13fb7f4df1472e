"""Display helpers for summary cards and chart annotations.

Formatting never feeds back into the model; every helper takes already
computed numbers and returns strings.
"""

from __future__ import annotations

import math
from typing import Optional

from legalflow.config.constants import MONTHS_PER_YEAR
from legalflow.engine.result import BreakEvenPoint, CalculationResults
from legalflow.models.inputs import CalculationInputs

NOT_APPLICABLE = "N/A"

NEGATIVE_SAVINGS_MESSAGE = "Savings are currently negative. Are you charging enough?"


def format_currency(value: float) -> str:
    """USD with thousands separators and no cents: 97200 -> "$97,200"."""
    amount = f"${abs(value):,.0f}"
    return f"-{amount}" if round(value) < 0 else amount


def format_hours(value: float) -> str:
    return f"{round(value):,}"


def payback_days(roi_days: Optional[float]) -> Optional[int]:
    """Whole working days to pay back the setup cost, rounded up."""
    if roi_days is None:
        return None
    return math.ceil(roi_days)


def format_roi_days(roi_days: Optional[float]) -> str:
    days = payback_days(roi_days)
    return NOT_APPLICABLE if days is None else str(days)


def payback_message(results: CalculationResults, setup_cost: float) -> str:
    days = payback_days(results.roi_days)
    if days is None:
        return NEGATIVE_SAVINGS_MESSAGE
    return (
        f"Your {format_currency(setup_cost)} investment pays for itself in "
        f"{days} days. The rest is pure profit (or fun)."
    )


def monthly_hours_reclaimed(results: CalculationResults) -> int:
    return round(results.hours_saved_annually / MONTHS_PER_YEAR)


def format_break_even_month(point: Optional[BreakEvenPoint]) -> Optional[str]:
    """Chart caption for the break-even marker, e.g. "Month 2.5"."""
    if point is None:
        return None
    return f"Month {point.month:.1f}"


def summary_cards(
    inputs: CalculationInputs,
    results: CalculationResults,
    break_even: Optional[BreakEvenPoint] = None,
) -> dict[str, Optional[str]]:
    """All display strings the results panel renders."""
    return {
        "opportunity_cost": format_currency(results.opportunity_cost),
        "hours_saved_annually": format_hours(results.hours_saved_annually),
        "roi_days": format_roi_days(results.roi_days),
        "payback_message": payback_message(results, inputs.setup_cost),
        "monthly_hours_reclaimed": str(monthly_hours_reclaimed(results)),
        "break_even": format_break_even_month(break_even),
    }
