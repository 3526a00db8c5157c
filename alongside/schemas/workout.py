from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from alongside.schemas.exercise import Exercise
from alongside.schemas.checkin import BurnoutReport


class WorkoutSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    exercises: List[Exercise]


class Workout(BaseModel):
    """Built once per check-in and never mutated afterwards."""
    model_config = ConfigDict(frozen=True)

    name: str
    energy_tier: str
    coach_message: str
    energy: int
    mood: int
    sections: List[WorkoutSection]
    estimated_credits: int = 0

    @property
    def exercise_ids(self) -> List[str]:
        return [ex.id for section in self.sections for ex in section.exercises]


class DailyWorkoutResponse(BaseModel):
    workout: Workout
    adaptation: Optional[BurnoutReport] = None
