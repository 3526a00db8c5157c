from datetime import date as DateType
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def clamp(value, low: int, high: int, default: int) -> int:
    """Coerce to int and pin to [low, high]. Out-of-range input is clamped, never rejected."""
    if value is None:
        return default
    try:
        number = int(round(float(value)))
    except (TypeError, ValueError):
        return default
    return max(low, min(high, number))


class Condition(BaseModel):
    model_config = ConfigDict(frozen=True)

    area: str
    severity: int = Field(1, validation_alias=AliasChoices("severity", "pain"))

    @field_validator("area", mode="before")
    @classmethod
    def normalize_area(cls, v):
        area = str(v).strip().lower() if v is not None else ""
        if not area:
            # A blank area would match every contraindication tag
            raise ValueError("condition area must not be empty")
        return area

    @field_validator("severity", mode="before")
    @classmethod
    def clamp_severity(cls, v):
        # Unreadable severity is treated as the worst case
        return clamp(v, 1, 10, default=10)


def _area_of(condition) -> str:
    if isinstance(condition, Condition):
        return condition.area
    area = condition.get("area") if isinstance(condition, dict) else getattr(condition, "area", None)
    return str(area).strip() if area is not None else ""


class CheckinContext(BaseModel):
    """Daily self-report. Immutable input to the selection engine."""
    model_config = ConfigDict(frozen=True)

    energy: int = 5
    mood: int = 5
    conditions: List[Condition] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    sleep_quality: Optional[int] = Field(None, description="1 (poor) to 5 (great)")

    @field_validator("energy", "mood", mode="before")
    @classmethod
    def clamp_rating(cls, v):
        return clamp(v, 1, 10, default=5)

    @field_validator("sleep_quality", mode="before")
    @classmethod
    def clamp_sleep(cls, v):
        if v is None:
            return None
        return clamp(v, 1, 5, default=3)

    @field_validator("conditions", mode="before")
    @classmethod
    def drop_empty_conditions(cls, v):
        return [c for c in (v or []) if _area_of(c)]


# RESPONSES
class CheckinRecord(BaseModel):
    date: DateType
    energy: int
    mood: int
    sleep_quality: Optional[int] = None
    avg_condition_pain: int = 0
    skipped: bool = False

    class Config:
        from_attributes = True


class BurnoutReport(BaseModel):
    detected: bool = False
    patterns: List[str] = Field(default_factory=list)
    severity: str = "low"  # low / moderate / high
    mode: str = "normal"   # normal / recovery
    message: Optional[str] = None
