from datetime import datetime, timedelta
from typing import Iterable, List

from alongside.schemas.economy import CompletionEvent, LifetimeStats, Tier, WeeklyStats

# Minimum weekly minutes per tier, ascending
TIER_THRESHOLDS = [
    (0, Tier.BUILDING),
    (60, Tier.BRONZE),
    (120, Tier.SILVER),
    (180, Tier.GOLD),
    (240, Tier.PLATINUM),
]


def get_week_start(reference: datetime) -> datetime:
    """Monday 00:00 on or before `reference` (Sunday belongs to the week that started 6 days earlier)."""
    monday = reference - timedelta(days=reference.weekday())
    return monday.replace(hour=0, minute=0, second=0, microsecond=0)


def get_weekly_stats(history: Iterable[CompletionEvent], reference_date: datetime) -> WeeklyStats:
    week_start = get_week_start(reference_date)
    week_end = week_start + timedelta(days=7)

    this_week: List[CompletionEvent] = [e for e in history if week_start <= e.date < week_end]

    return WeeklyStats(
        week_start=week_start,
        week_end=week_end,
        total_minutes=sum(e.duration_minutes or 0 for e in this_week),
        total_credits=sum(e.credits or 0 for e in this_week),
        workout_count=len({e.date.date() for e in this_week}),
        events=this_week,
    )


def get_weekly_tier(total_minutes: float) -> Tier:
    tier = Tier.BUILDING
    for threshold, candidate in TIER_THRESHOLDS:
        if total_minutes >= threshold:
            tier = candidate
    return tier


def get_lifetime_stats(history: Iterable[CompletionEvent]) -> LifetimeStats:
    events = list(history)
    return LifetimeStats(
        total_minutes=sum(e.duration_minutes or 0 for e in events),
        total_credits=sum(e.credits or 0 for e in events),
        completion_count=len(events),
    )
