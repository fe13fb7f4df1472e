"""Human-readable progress messages shown while an insight is generating."""

from __future__ import annotations

import random
from typing import Optional

FUN_ACTIVITIES: tuple[str, ...] = (
    "mastering roller derby",
    "learning the banjo",
    "competitive dog grooming",
    "becoming a pizza snob",
    "training for a marathon",
    "perfecting your sourdough",
    "learning to juggle",
    "taking 3-hour naps",
    "watching every 80s movie",
    "writing a bad novel",
)


def pick_fun_activity(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(FUN_ACTIVITIES)


def get_progress_message(activity: Optional[str] = None) -> str:
    """Loading copy for the insight card.

    With no activity given, one is picked at random.
    """
    activity = activity or pick_fun_activity()
    return f"Consulting the efficiency oracle regarding {activity}..."
