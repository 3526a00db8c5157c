from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from alongside.api.deps import get_catalog, get_economy_manager
from alongside.schemas.economy import (
    BankHistoryEntry,
    BankResult,
    CompletionEvent,
    CompletionRequest,
    CompletionResult,
    CooldownDecision,
    CreditPreview,
    LifetimeStats,
    RedemptionResult,
    SpendRequest,
    Tier,
    TreatGroup,
    TreatHistoryEntry,
    WeeklySummary,
)
from alongside.services import rewards
from alongside.services.credit_calculator import calculate_credits
from alongside.services.economy_manager import EconomyManager
from alongside.services.exercise_catalog import ExerciseCatalog


router = APIRouter(prefix="/economy", tags=["Economy"])


# --- Static catalog lookups ---

@router.get("/tiers/{tier}/treats", response_model=List[TreatGroup])
def treats_for_tier(tier: Tier):
    return rewards.get_treats_for_tier(tier)


@router.get("/credits/preview/{exercise_id}", response_model=CreditPreview)
def preview_credits(exercise_id: str, catalog: ExerciseCatalog = Depends(get_catalog)):
    exercise = catalog.get(exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return CreditPreview(exercise_id=exercise.id, credits=calculate_credits(exercise))


# --- Completion log ---

@router.post("/{user_id}/completions", response_model=CompletionResult, status_code=status.HTTP_201_CREATED)
def log_completion(
    user_id: int,
    request: CompletionRequest,
    manager: EconomyManager = Depends(get_economy_manager),
):
    """
    Log a finished exercise and return the credits earned plus this week's stats.
    """
    try:
        return manager.log_exercise_completion(
            user_id,
            request.exercise_id,
            actual_duration=request.actual_duration,
            actual_reps=request.actual_reps,
        )
    except ValueError as ve:
        raise HTTPException(status_code=404, detail=str(ve))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to log completion")


@router.get("/{user_id}/history", response_model=List[CompletionEvent])
def completion_history(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.get_history(user_id)


@router.get("/{user_id}/weekly", response_model=WeeklySummary)
def weekly_summary(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.get_weekly_summary(user_id)


@router.get("/{user_id}/lifetime", response_model=LifetimeStats)
def lifetime_stats(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.get_lifetime_stats(user_id)


# --- Treats ---

@router.get("/{user_id}/can-spend", response_model=CooldownDecision)
def can_spend(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.can_spend(user_id)


@router.post("/{user_id}/spend", response_model=RedemptionResult)
def spend(
    user_id: int,
    request: SpendRequest,
    manager: EconomyManager = Depends(get_economy_manager),
):
    """
    Redeem a treat. Cooldown, tier and unknown-treat refusals come back as a
    normal result with a status, not as an HTTP error.
    """
    try:
        return manager.redeem_treat(user_id, request.treat_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to redeem treat")


@router.get("/{user_id}/treats/history", response_model=List[TreatHistoryEntry])
def treat_history(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.get_treat_history(user_id)


# --- Banking ---

@router.post("/{user_id}/bank", response_model=BankResult)
def bank(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    try:
        return manager.bank_week(user_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to bank week")


@router.get("/{user_id}/banked-weeks")
def banked_weeks(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return {"banked_weeks": manager.get_banked_weeks(user_id)}


@router.get("/{user_id}/bank/history", response_model=List[BankHistoryEntry])
def bank_history(user_id: int, manager: EconomyManager = Depends(get_economy_manager)):
    return manager.get_bank_history(user_id)
