from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class MovementPattern(str, Enum):
    HINGE = "hinge"
    SQUAT = "squat"
    LUNGE = "lunge"
    PUSH = "push"
    PULL = "pull"
    CARRY = "carry"
    ROTATION = "rotation"
    MOBILITY = "mobility"
    STABILITY = "stability"
    LOCOMOTION = "locomotion"
    RECOVERY = "recovery"


class EnergyLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DurationUnit(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"


class Exercise(BaseModel):
    """
    Validated catalog record.
    Catalog files use camelCase keys; snake_case is accepted too.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    movement_pattern: MovementPattern = Field(
        ..., validation_alias=AliasChoices("movement_pattern", "movementPattern")
    )
    energy_required: EnergyLevel = Field(
        ..., validation_alias=AliasChoices("energy_required", "energyRequired")
    )
    duration: Optional[float] = Field(None, ge=0)
    duration_unit: Optional[DurationUnit] = Field(
        None, validation_alias=AliasChoices("duration_unit", "durationUnit")
    )
    contraindications: List[str] = Field(default_factory=list)
    reps: Optional[int] = Field(None, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        # Some catalog files number their exercises
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("contraindications", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [str(tag).strip().lower() for tag in v if str(tag).strip()]

    @property
    def is_rep_based(self) -> bool:
        return self.reps is not None
