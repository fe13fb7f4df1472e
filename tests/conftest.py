"""Shared test fixtures for the LegalFlow ROI test suite."""

import pytest

from legalflow.models.inputs import CalculationInputs


def make_inputs(**overrides) -> CalculationInputs:
    """Landing-page defaults with selected fields replaced."""
    values = {
        "hourly_rate": 450,
        "monthly_volume": 8,
        "hours_per_doc_manual": 2.5,
        "minutes_per_doc_auto": 15,
        "setup_cost": 2000,
    }
    values.update(overrides)
    return CalculationInputs(**values)


@pytest.fixture
def scenario_a() -> CalculationInputs:
    """$450/hr attorney, 8 agreements a month, 2.5 hrs manual vs 15 min automated.

    Worked numbers: 240 manual hours, 24 automated hours, $97,200 saved,
    payback in ~5.35 working days.
    """
    return make_inputs()


@pytest.fixture
def slower_automation() -> CalculationInputs:
    """Automation configured slower than manual drafting -- savings go negative."""
    return make_inputs(hours_per_doc_manual=0.5, minutes_per_doc_auto=60)


@pytest.fixture
def zero_setup() -> CalculationInputs:
    return make_inputs(setup_cost=0)


@pytest.fixture
def all_zero() -> CalculationInputs:
    return CalculationInputs(
        hourly_rate=0,
        monthly_volume=0,
        hours_per_doc_manual=0,
        minutes_per_doc_auto=0,
        setup_cost=0,
    )
