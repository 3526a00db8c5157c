from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Tier(str, Enum):
    BUILDING = "building"
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"

    @property
    def rank(self) -> int:
        return list(Tier).index(self)


class TreatCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    PREMIUM = "premium"


class Treat(BaseModel):
    id: str
    name: str
    category: TreatCategory
    icon: Optional[str] = None
    description: str = ""


class TreatGroup(BaseModel):
    category: TreatCategory
    category_name: str
    treats: List[Treat]


class TierDetails(BaseModel):
    id: Tier
    name: str
    icon: str
    colour: str
    unlocks: List[TreatCategory]
    message: str
    min_minutes: int


class CompletionEvent(BaseModel):
    exercise_id: str
    exercise_name: Optional[str] = None
    date: datetime
    duration_minutes: float
    credits: int = Field(..., ge=5)

    class Config:
        from_attributes = True


class WeeklyStats(BaseModel):
    week_start: datetime
    week_end: datetime
    total_minutes: float = 0
    total_credits: int = 0
    workout_count: int = 0
    events: List[CompletionEvent] = Field(default_factory=list)


class LifetimeStats(BaseModel):
    total_minutes: float = 0
    total_credits: int = 0
    completion_count: int = 0


class LastTreatRecord(BaseModel):
    id: str
    name: str
    date: datetime


class CooldownDecision(BaseModel):
    allowed: bool
    days_since: Optional[int] = None
    days_remaining: Optional[int] = None
    last_treat: Optional[str] = None


class BankHistoryEntry(BaseModel):
    date: datetime
    week_number: int

    class Config:
        from_attributes = True


class TreatHistoryEntry(BaseModel):
    treat_id: str
    name: str
    category: TreatCategory
    description: Optional[str] = None
    date: datetime

    class Config:
        from_attributes = True


class RedemptionStatus(str, Enum):
    SPENT = "spent"
    COOLDOWN_ACTIVE = "cooldown_active"
    INSUFFICIENT_TIER = "insufficient_tier"
    UNKNOWN_TREAT = "unknown_treat"


class RedemptionResult(BaseModel):
    status: RedemptionStatus
    treat: Optional[Treat] = None
    tier: Optional[Tier] = None
    cooldown: Optional[CooldownDecision] = None
    banked_weeks: int = 0


# REQUESTS
class CompletionRequest(BaseModel):
    exercise_id: str
    actual_duration: Optional[float] = Field(None, gt=0, description="In the exercise's own duration unit")
    actual_reps: Optional[int] = Field(None, gt=0)


class SpendRequest(BaseModel):
    treat_id: str


# RESPONSES
class CompletionResult(BaseModel):
    credits: int
    duration_minutes: float
    weekly_stats: WeeklyStats


class WeeklySummary(BaseModel):
    stats: WeeklyStats
    tier: Tier
    tier_details: TierDetails
    available_treats: List[TreatGroup]
    cooldown: CooldownDecision
    banked_weeks: int


class BankResult(BaseModel):
    banked_weeks: int
    entry: BankHistoryEntry


class CreditPreview(BaseModel):
    exercise_id: str
    credits: int
