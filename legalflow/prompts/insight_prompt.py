"""Prompt for the witty legal-ops summary of a calculation."""

from __future__ import annotations

from legalflow.engine.formatting import format_roi_days, monthly_hours_reclaimed
from legalflow.engine.result import CalculationResults
from legalflow.models.inputs import CalculationInputs

SYSTEM_PROMPT = """\
You are a witty Legal Operations Consultant who hates inefficiency. \
You write short, punchy prose for attorneys. Never use markdown headers.
"""

INSIGHT_PROMPT_TEMPLATE = """\
Context:
A commercial attorney (Solo/Small Firm) is currently drowning in manual document drafting.
- Manual Process: {manual_hours} hours/doc (Painful).
- Automated Process: {auto_minutes} minutes/doc (Magic).
- Volume: {volume} docs/month.
- Rate: ${rate}/hr.
- Setup: ${setup_cost}.
- Savings: ${annual_savings} & {hours_saved} hours.
- Break-even: {roi_days} days.

Task:
Write a 3-paragraph summary that is professional but has personality (smart, punchy, slightly humorous).

1. The Reality Check: Validate the misery of spending {manual_hours} hours on a standard doc. \
Mention that the investment pays for itself in just {roi_days} days (a "no-brainer").
2. The Freedom: Explain what saving ~{monthly_hours} hours/month actually feels like (sanity restored).
3. The "Roller Skate" Factor: Suggest one serious business move (like landing a whale client) \
AND one completely fun/unexpected hobby (like roller derby, learning the banjo, competitive napping, \
or attending clown college) they can finally pursue with the recovered time.

Tone: Witty, sharp, peer-to-peer, but mathematically sound. Keep it under 150 words. \
Do not use markdown headers.
"""


def _number(value: float) -> str:
    """Thousands-separated, at most three decimals, no trailing zeros."""
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_insight_prompt(inputs: CalculationInputs, results: CalculationResults) -> str:
    """Interpolate the inputs and results into the fixed prompt wording."""
    return INSIGHT_PROMPT_TEMPLATE.format(
        manual_hours=_number(inputs.hours_per_doc_manual),
        auto_minutes=_number(inputs.minutes_per_doc_auto),
        volume=_number(inputs.monthly_volume),
        rate=_number(inputs.hourly_rate),
        setup_cost=_number(inputs.setup_cost),
        annual_savings=_number(results.annual_savings),
        hours_saved=_number(results.hours_saved_annually),
        roi_days=format_roi_days(results.roi_days),
        monthly_hours=monthly_hours_reclaimed(results),
    )
