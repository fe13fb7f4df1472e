from .calculator import CalculationEngine, compute
from .projection import break_even_point, build_series, monthly_costs, project
from .result import BreakEvenPoint, CalculationResults, ProjectionPoint, ProjectionSeries

__all__ = [
    "CalculationEngine",
    "compute",
    "break_even_point",
    "build_series",
    "monthly_costs",
    "project",
    "BreakEvenPoint",
    "CalculationResults",
    "ProjectionPoint",
    "ProjectionSeries",
]
