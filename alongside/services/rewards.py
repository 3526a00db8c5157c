"""
Reward catalog, cooldown gate and week banking.
Pure functions over explicit state; persistence lives in EconomyManager.
"""
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from alongside.schemas.economy import (
    BankHistoryEntry,
    CooldownDecision,
    LastTreatRecord,
    Tier,
    TierDetails,
    Treat,
    TreatCategory,
    TreatGroup,
)

TREAT_COOLDOWN_DAYS = 7

TIER_DETAILS = {
    Tier.BUILDING: TierDetails(
        id=Tier.BUILDING, name="Building", icon="🌱", colour="#64748b",
        unlocks=[],
        message="Keep building! You're laying the foundation.",
        min_minutes=0,
    ),
    Tier.BRONZE: TierDetails(
        id=Tier.BRONZE, name="Bronze", icon="🥉", colour="#cd7f32",
        unlocks=[TreatCategory.SMALL],
        message="Solid week! You've earned a small reward.",
        min_minutes=60,
    ),
    Tier.SILVER: TierDetails(
        id=Tier.SILVER, name="Silver", icon="🥈", colour="#c0c0c0",
        unlocks=[TreatCategory.SMALL, TreatCategory.MEDIUM],
        message="Great consistency! A medium treat is yours if you want it.",
        min_minutes=120,
    ),
    Tier.GOLD: TierDetails(
        id=Tier.GOLD, name="Gold", icon="🥇", colour="#ffd700",
        unlocks=[TreatCategory.SMALL, TreatCategory.MEDIUM, TreatCategory.LARGE],
        message="Impressive dedication! You've unlocked the large treats.",
        min_minutes=180,
    ),
    Tier.PLATINUM: TierDetails(
        id=Tier.PLATINUM, name="Platinum", icon="💎", colour="#e5e4e2",
        unlocks=[TreatCategory.SMALL, TreatCategory.MEDIUM, TreatCategory.LARGE, TreatCategory.PREMIUM],
        message="Outstanding! Consider banking this week for something special.",
        min_minutes=240,
    ),
}

TREATS = {
    TreatCategory.SMALL: [
        Treat(id="fancy-coffee", name="Fancy Coffee", category=TreatCategory.SMALL, icon="☕", description="Barista-made treat"),
        Treat(id="small-snack", name="Small Snack", category=TreatCategory.SMALL, icon="🍪", description="A little something sweet"),
    ],
    TreatCategory.MEDIUM: [
        Treat(id="cake", name="Cake or Dessert", category=TreatCategory.MEDIUM, icon="🍰", description="A proper slice"),
        Treat(id="glass-wine", name="Glass of Wine", category=TreatCategory.MEDIUM, icon="🍷", description="One glass, savoured"),
        Treat(id="beer", name="Pint of Beer", category=TreatCategory.MEDIUM, icon="🍺", description="A well-earned pint"),
        Treat(id="chocolate", name="Chocolate Bar", category=TreatCategory.MEDIUM, icon="🍫", description="Full size"),
    ],
    TreatCategory.LARGE: [
        Treat(id="takeaway", name="Takeaway Meal", category=TreatCategory.LARGE, icon="🍕", description="Delivery or collection"),
        Treat(id="bottle-wine", name="Bottle of Wine", category=TreatCategory.LARGE, icon="🍾", description="To share (or not)"),
    ],
    TreatCategory.PREMIUM: [
        Treat(id="restaurant", name="Restaurant Meal", category=TreatCategory.PREMIUM, icon="🍽️", description="The full experience"),
        Treat(id="cheat-day", name="Cheat Day", category=TreatCategory.PREMIUM, icon="🎉", description="No logging required"),
    ],
}


def get_tier_details(tier) -> TierDetails:
    try:
        return TIER_DETAILS[Tier(tier)]
    except ValueError:
        return TIER_DETAILS[Tier.BUILDING]


def get_treats_for_tier(tier) -> List[TreatGroup]:
    details = get_tier_details(tier)
    return [
        TreatGroup(category=category, category_name=category.value.capitalize(), treats=TREATS[category])
        for category in details.unlocks
    ]


def find_treat(treat_id: str) -> Optional[Treat]:
    for treats in TREATS.values():
        for treat in treats:
            if treat.id == treat_id:
                return treat
    return None


def is_unlocked(treat: Treat, tier) -> bool:
    return treat.category in get_tier_details(tier).unlocks


def can_spend_treat(last_treat: Optional[LastTreatRecord], now: datetime) -> CooldownDecision:
    if last_treat is None:
        return CooldownDecision(allowed=True)

    # A record dated in the future (clock skew) counts as "today"
    days_since = max((now - last_treat.date) // timedelta(days=1), 0)

    if days_since < TREAT_COOLDOWN_DAYS:
        return CooldownDecision(
            allowed=False,
            days_since=days_since,
            days_remaining=TREAT_COOLDOWN_DAYS - days_since,
            last_treat=last_treat.name,
        )
    return CooldownDecision(allowed=True, days_since=days_since)


def iso_week_number(moment: datetime) -> int:
    return moment.isocalendar()[1]


def bank_week(banked_weeks: int, now: datetime) -> Tuple[int, BankHistoryEntry]:
    """Next banked-week count plus the history entry recording this decision."""
    entry = BankHistoryEntry(date=now, week_number=iso_week_number(now))
    return (banked_weeks or 0) + 1, entry
