from fastapi import APIRouter, Depends, HTTPException

from alongside.api.deps import get_catalog, get_checkin_service, get_rng
from alongside.schemas.checkin import CheckinContext, clamp
from alongside.schemas.workout import DailyWorkoutResponse
from alongside.services.checkin_service import CheckinService
from alongside.services.coach import WORKOUT_CONFIGS, build_daily_workout, get_energy_tier
from alongside.services.exercise_catalog import ExerciseCatalog

router = APIRouter(prefix="/coach", tags=["Coach"])


@router.post("/{user_id}/daily-workout", response_model=DailyWorkoutResponse)
def daily_workout(
    user_id: int,
    context: CheckinContext,
    catalog: ExerciseCatalog = Depends(get_catalog),
    rng=Depends(get_rng),
    checkins: CheckinService = Depends(get_checkin_service),
):
    """
    Build today's workout from a check-in.
    The burnout adaptation from recent check-ins is returned alongside for the client to present.
    """
    workout = build_daily_workout(context, catalog, rng)
    if workout is None:
        raise HTTPException(status_code=404, detail="No exercises available for this check-in")

    return DailyWorkoutResponse(
        workout=workout,
        adaptation=checkins.get_burnout_adaptation(user_id),
    )


@router.get("/energy-tier/{energy}")
def energy_tier(energy: int):
    energy = clamp(energy, 1, 10, default=5)
    tier = get_energy_tier(energy)
    config = WORKOUT_CONFIGS[tier]
    return {
        "energy": energy,
        "tier": tier,
        "name": config["name"],
        "max_duration": config["max_duration"],
        "max_exercises": config["max_exercises"],
        "sections": [{"name": name, "patterns": patterns, "count": count}
                     for name, patterns, count in config["sections"]],
    }
