"""
Credit Calculator
-----------------
credits = BASE_CREDITS_PER_MINUTE x minutes x intensity multiplier,
rounded half-up and never below MINIMUM_CREDITS.

Works on validated Exercise records as well as loose dicts coming straight
from a catalog file or request body; missing fields fall back to defaults.
"""
import math
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

INTENSITY_MULTIPLIERS = {
    "low": 0.5,
    "medium": 1.0,
    "high": 1.5,
    "veryHigh": 2.0,
}

BASE_CREDITS_PER_MINUTE = 5
MINIMUM_CREDITS = 5

DEFAULT_DURATION = 30
DEFAULT_DURATION_UNIT = "minutes"
SECONDS_PER_REP = 3


def _field(exercise: Any, snake: str, camel: Optional[str] = None):
    if isinstance(exercise, BaseModel):
        value = getattr(exercise, snake, None)
    elif isinstance(exercise, dict):
        value = exercise.get(snake)
        if value is None and camel:
            value = exercise.get(camel)
    else:
        value = getattr(exercise, snake, None)
    if isinstance(value, Enum):
        return value.value
    return value


def duration_in_minutes(exercise: Any, actual_duration: Optional[float] = None,
                        actual_reps: Optional[int] = None) -> float:
    """
    Minutes an exercise is worth.
    `actual_duration` overrides the catalog duration and is read in the exercise's own unit.
    Rep-based exercises with an actual rep count are estimated at 3 seconds per rep.
    """
    if actual_reps and _field(exercise, "reps") is not None:
        return actual_reps * SECONDS_PER_REP / 60

    duration = actual_duration or _field(exercise, "duration") or DEFAULT_DURATION
    unit = _field(exercise, "duration_unit", "durationUnit") or DEFAULT_DURATION_UNIT

    if unit == "seconds":
        return duration / 60
    return float(duration)


def calculate_credits(exercise: Any, actual_reps: Optional[int] = None) -> int:
    if exercise is None:
        return MINIMUM_CREDITS

    minutes = duration_in_minutes(exercise, actual_reps=actual_reps)

    intensity = _field(exercise, "energy_required", "energyRequired") or "medium"
    multiplier = INTENSITY_MULTIPLIERS.get(intensity, 1.0)

    # Half-up, not banker's rounding: 2.5 -> 3
    credits = math.floor(BASE_CREDITS_PER_MINUTE * minutes * multiplier + 0.5)

    return max(credits, MINIMUM_CREDITS)


def credits_for_minutes(minutes: float, intensity: Any) -> int:
    """Credits for an already-converted duration, e.g. a logged completion."""
    return calculate_credits({
        "duration": minutes,
        "duration_unit": "minutes",
        "energy_required": intensity.value if isinstance(intensity, Enum) else intensity,
    })
