"""Cumulative cost projection for the manual vs. automated chart."""

from __future__ import annotations

from typing import Optional

from legalflow.config.constants import MINUTES_PER_HOUR, PROJECTION_HORIZON_MONTHS
from legalflow.engine.result import BreakEvenPoint, ProjectionPoint, ProjectionSeries
from legalflow.models.inputs import CalculationInputs


def monthly_costs(inputs: CalculationInputs) -> tuple[float, float]:
    """Return (monthly manual cost, monthly automated cost) for the inputs."""
    manual = inputs.monthly_volume * inputs.hours_per_doc_manual * inputs.hourly_rate
    automated = (
        inputs.monthly_volume
        * (inputs.minutes_per_doc_auto / MINUTES_PER_HOUR)
        * inputs.hourly_rate
    )
    return manual, automated


def break_even_point(
    monthly_manual_cost: float,
    monthly_automated_cost: float,
    setup_cost: float,
    horizon_months: int = PROJECTION_HORIZON_MONTHS,
) -> Optional[BreakEvenPoint]:
    """Fractional month at which cumulative costs cross, if it is on the chart.

    A crossing before month 0 (no setup cost) or after the horizon is
    reported as absent so the marker never lands outside the series.
    """
    monthly_savings_rate = monthly_manual_cost - monthly_automated_cost
    if monthly_savings_rate <= 0:
        return None

    month = setup_cost / monthly_savings_rate
    if not 0 < month <= horizon_months:
        return None
    return BreakEvenPoint(month=month, cumulative_cost=monthly_manual_cost * month)


def build_series(
    monthly_manual_cost: float,
    monthly_automated_cost: float,
    setup_cost: float,
    horizon_months: int = PROJECTION_HORIZON_MONTHS,
) -> ProjectionSeries:
    """Build cumulative costs for months 0..horizon plus the break-even marker."""
    points = tuple(
        ProjectionPoint(
            month=month,
            manual_cumulative=monthly_manual_cost * month,
            automated_cumulative=setup_cost + monthly_automated_cost * month,
        )
        for month in range(horizon_months + 1)
    )
    return ProjectionSeries(
        points=points,
        monthly_manual_cost=monthly_manual_cost,
        monthly_automated_cost=monthly_automated_cost,
        setup_cost=setup_cost,
        break_even=break_even_point(
            monthly_manual_cost, monthly_automated_cost, setup_cost, horizon_months
        ),
    )


def project(
    inputs: CalculationInputs,
    horizon_months: int = PROJECTION_HORIZON_MONTHS,
) -> ProjectionSeries:
    """Derive monthly costs from the inputs and build the series."""
    manual, automated = monthly_costs(inputs)
    return build_series(manual, automated, inputs.setup_cost, horizon_months)
