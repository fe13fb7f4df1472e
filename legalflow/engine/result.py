"""Immutable result data structures for the ROI model and cost projection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CalculationResults:
    """Annual figures derived from a single set of inputs.

    ``roi_days`` is ``None`` when savings are zero or negative: payback is
    not meaningful and callers render "N/A".
    """

    annual_savings: float
    monthly_savings: float
    hours_saved_annually: float
    opportunity_cost: float
    roi_days: Optional[float] = None

    @property
    def pays_back(self) -> bool:
        return self.roi_days is not None

    def to_payload(self) -> dict[str, Optional[float]]:
        """camelCase dict matching the lead webhook contract."""
        return {
            "annualSavings": self.annual_savings,
            "monthlySavings": self.monthly_savings,
            "hoursSavedAnnually": self.hours_saved_annually,
            "opportunityCost": self.opportunity_cost,
            "roiDays": self.roi_days,
        }


@dataclass(frozen=True)
class ProjectionPoint:
    """Cumulative cost of both regimes at the end of a given month."""

    month: int
    manual_cumulative: float
    automated_cumulative: float

    @property
    def savings(self) -> float:
        return self.manual_cumulative - self.automated_cumulative

    @property
    def label(self) -> str:
        return "Start" if self.month == 0 else f"Month {self.month}"


@dataclass(frozen=True)
class BreakEvenPoint:
    """Where the automated cost line crosses the manual one."""

    month: float
    cumulative_cost: float


@dataclass(frozen=True)
class ProjectionSeries:
    """Month-by-month cumulative costs plus the optional break-even marker."""

    points: tuple[ProjectionPoint, ...]
    monthly_manual_cost: float
    monthly_automated_cost: float
    setup_cost: float
    break_even: Optional[BreakEvenPoint] = None

    @property
    def horizon_months(self) -> int:
        return self.points[-1].month

    def to_dict(self) -> dict:
        return {
            "points": [
                {
                    "month": p.month,
                    "label": p.label,
                    "manual_cumulative": p.manual_cumulative,
                    "automated_cumulative": p.automated_cumulative,
                    "savings": p.savings,
                }
                for p in self.points
            ],
            "break_even": (
                {
                    "month": self.break_even.month,
                    "cumulative_cost": self.break_even.cumulative_cost,
                }
                if self.break_even is not None
                else None
            ),
            "monthly_manual_cost": self.monthly_manual_cost,
            "monthly_automated_cost": self.monthly_automated_cost,
            "setup_cost": self.setup_cost,
        }
