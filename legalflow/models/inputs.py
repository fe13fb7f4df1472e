"""Calculator inputs and the slider definitions that bound them in the UI."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class CalculationInputs:
    """The five user-adjustable values the ROI model runs on.

    All values are expected to be non-negative and finite. The model does
    not enforce the slider bounds; ``monthly_volume`` may be fractional.
    """

    hourly_rate: float
    monthly_volume: float
    hours_per_doc_manual: float
    minutes_per_doc_auto: float
    setup_cost: float

    @classmethod
    def defaults(cls) -> CalculationInputs:
        """Inputs as the landing page first renders them."""
        return cls(**{slider.field: slider.default for slider in SLIDERS})

    def to_payload(self) -> dict[str, float]:
        """camelCase dict matching the lead webhook contract."""
        return {
            "hourlyRate": self.hourly_rate,
            "monthlyVolume": self.monthly_volume,
            "hoursPerDocManual": self.hours_per_doc_manual,
            "minutesPerDocAuto": self.minutes_per_doc_auto,
            "setupCost": self.setup_cost,
        }

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class SliderDefinition:
    """Presentation bounds for one input slider."""

    field: str
    label: str
    minimum: float
    maximum: float
    step: float
    default: float
    description: str
    prefix: str = ""
    unit: str = ""

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


SLIDERS: tuple[SliderDefinition, ...] = (
    SliderDefinition(
        field="hourly_rate",
        label="Billable Hourly Rate",
        minimum=200,
        maximum=1500,
        step=25,
        default=450,
        prefix="$",
        description="Your standard rate. Be honest!",
    ),
    SliderDefinition(
        field="monthly_volume",
        label="Agreements Per Month",
        minimum=1,
        maximum=50,
        step=1,
        default=8,
        description="How many of these headaches do you handle?",
    ),
    SliderDefinition(
        field="hours_per_doc_manual",
        label="Manual Drafting Time",
        minimum=0.5,
        maximum=5,
        step=0.5,
        default=2.5,
        unit=" hrs",
        description="Time spent wrestling with formatting manually.",
    ),
    SliderDefinition(
        field="minutes_per_doc_auto",
        label="Automated Time",
        minimum=5,
        maximum=60,
        step=5,
        default=15,
        unit=" min",
        description="Time with LegalFlow (aka Magic Mode).",
    ),
    SliderDefinition(
        field="setup_cost",
        label="Implementation Fee",
        minimum=0,
        maximum=10000,
        step=100,
        default=2000,
        prefix="$",
        description="One-time cost (the price of freedom).",
    ),
)


def get_slider(field: str) -> Optional[SliderDefinition]:
    """Look up a slider definition by input field name."""
    for slider in SLIDERS:
        if slider.field == field:
            return slider
    return None
