"""ROI model: turns calculator inputs into annual savings and payback time.

Pure arithmetic, no I/O and no state. Zero or negative savings are valid
outcomes and come back as ``roi_days=None`` rather than an error.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from legalflow.config.constants import (
    MINUTES_PER_HOUR,
    MONTHS_PER_YEAR,
    WORKING_DAYS_PER_YEAR,
)
from legalflow.engine.result import CalculationResults
from legalflow.models.inputs import CalculationInputs

logger = logging.getLogger(__name__)


def _roi_days(
    annual_savings: float,
    setup_cost: float,
    working_days_per_year: float = WORKING_DAYS_PER_YEAR,
) -> Optional[float]:
    """Working days of savings needed to cover the setup cost.

    ``None`` when nothing is saved, or when the quotient is not a finite
    number (tiny savings against a large setup cost).
    """
    if not annual_savings > 0:
        return None
    # Same as setup_cost / (annual_savings / days) without underflowing the daily rate
    days = setup_cost * working_days_per_year / annual_savings
    return days if math.isfinite(days) else None


def compute(
    inputs: CalculationInputs,
    working_days_per_year: float = WORKING_DAYS_PER_YEAR,
    months_per_year: float = MONTHS_PER_YEAR,
) -> CalculationResults:
    """Run the ROI model for one set of inputs."""
    annual_docs = inputs.monthly_volume * months_per_year

    annual_hours_manual = annual_docs * inputs.hours_per_doc_manual
    annual_hours_auto = annual_docs * (inputs.minutes_per_doc_auto / MINUTES_PER_HOUR)
    # Negative when automation is slower; surfaced as-is
    hours_saved_annually = annual_hours_manual - annual_hours_auto

    annual_cost_manual = annual_hours_manual * inputs.hourly_rate
    annual_cost_auto = annual_hours_auto * inputs.hourly_rate
    annual_savings = annual_cost_manual - annual_cost_auto

    roi_days = _roi_days(annual_savings, inputs.setup_cost, working_days_per_year)

    return CalculationResults(
        annual_savings=annual_savings,
        monthly_savings=annual_savings / months_per_year,
        hours_saved_annually=hours_saved_annually,
        opportunity_cost=annual_savings,
        roi_days=roi_days,
    )


class CalculationEngine:
    """Stateless engine that runs ROI calculations."""

    def __init__(
        self,
        working_days_per_year: float = WORKING_DAYS_PER_YEAR,
        months_per_year: float = MONTHS_PER_YEAR,
    ) -> None:
        self.working_days_per_year = working_days_per_year
        self.months_per_year = months_per_year

    def calculate(self, inputs: CalculationInputs) -> CalculationResults:
        results = compute(
            inputs,
            working_days_per_year=self.working_days_per_year,
            months_per_year=self.months_per_year,
        )
        if not results.pays_back:
            logger.debug("No payback for inputs %s (savings %.2f)", inputs, results.annual_savings)
        return results
