import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from alongside.models.completion import ExerciseCompletion
from alongside.models.economy import BankedWeek, EconomyState, TreatRedemption
from alongside.schemas.economy import (
    BankHistoryEntry,
    BankResult,
    CompletionEvent,
    CompletionResult,
    CooldownDecision,
    LastTreatRecord,
    LifetimeStats,
    RedemptionResult,
    RedemptionStatus,
    Treat,
    TreatHistoryEntry,
    WeeklyStats,
    WeeklySummary,
)
from alongside.schemas.exercise import Exercise
from alongside.services import rewards, weekly_ledger
from alongside.services.credit_calculator import credits_for_minutes, duration_in_minutes
from alongside.services.exercise_catalog import ExerciseCatalog
from alongside.utils.clock import Clock

logger = logging.getLogger(__name__)


class EconomyManager:
    """
    Single writer for the completion log and the economy counters
    (last treat, treat history, banked weeks, bank history).

    Every mutation runs under `lock` and commits as one transaction; on failure
    the session is rolled back so no partial state is ever visible.
    Share one lock between all managers that touch the same database.
    """

    def __init__(self, db: Session, clock: Clock, catalog: Optional[ExerciseCatalog] = None,
                 lock: Optional[threading.RLock] = None):
        self.db = db
        self.clock = clock
        self.catalog = catalog
        self.lock = lock or threading.RLock()

    @contextmanager
    def _transaction(self, action: str):
        with self.lock:
            try:
                yield
                self.db.commit()
            except Exception as e:
                self.db.rollback()
                logger.error(f"Economy transaction '{action}' rolled back: {e}")
                raise

    def _get_state(self, user_id: int) -> EconomyState:
        state = self.db.query(EconomyState).filter(EconomyState.user_id == user_id).first()
        if not state:
            state = EconomyState(user_id=user_id, banked_weeks=0)
            self.db.add(state)
            self.db.flush()
        return state

    def _find_state(self, user_id: int) -> Optional[EconomyState]:
        return self.db.query(EconomyState).filter(EconomyState.user_id == user_id).first()

    def _resolve_exercise(self, exercise: Union[Exercise, str]) -> Exercise:
        if isinstance(exercise, Exercise):
            return exercise
        found = self.catalog.get(exercise) if self.catalog else None
        if not found:
            raise ValueError(f"Unknown exercise '{exercise}'")
        return found

    # --- Completion log ---

    def log_exercise_completion(self, user_id: int, exercise: Union[Exercise, str],
                                actual_duration: Optional[float] = None,
                                actual_reps: Optional[int] = None) -> CompletionResult:
        ex = self._resolve_exercise(exercise)
        now = self.clock.now()

        minutes = duration_in_minutes(ex, actual_duration=actual_duration, actual_reps=actual_reps)
        credits = credits_for_minutes(minutes, ex.energy_required)

        with self._transaction("log_completion"):
            self.db.add(ExerciseCompletion(
                user_id=user_id,
                exercise_id=ex.id,
                exercise_name=ex.name,
                date=now,
                duration_minutes=minutes,
                credits=credits,
            ))

        logger.info(f"User {user_id} completed '{ex.id}': {minutes:.2f} min, {credits} credits")

        return CompletionResult(
            credits=credits,
            duration_minutes=minutes,
            weekly_stats=self.get_weekly_stats(user_id, now),
        )

    def get_history(self, user_id: int) -> List[CompletionEvent]:
        rows = self.db.query(ExerciseCompletion).filter(
            ExerciseCompletion.user_id == user_id
        ).order_by(ExerciseCompletion.date, ExerciseCompletion.id).all()
        return [CompletionEvent.model_validate(r) for r in rows]

    def get_weekly_stats(self, user_id: int, reference: Optional[datetime] = None) -> WeeklyStats:
        return weekly_ledger.get_weekly_stats(self.get_history(user_id), reference or self.clock.now())

    def get_lifetime_stats(self, user_id: int) -> LifetimeStats:
        return weekly_ledger.get_lifetime_stats(self.get_history(user_id))

    def get_weekly_summary(self, user_id: int) -> WeeklySummary:
        stats = self.get_weekly_stats(user_id)
        tier = weekly_ledger.get_weekly_tier(stats.total_minutes)
        return WeeklySummary(
            stats=stats,
            tier=tier,
            tier_details=rewards.get_tier_details(tier),
            available_treats=rewards.get_treats_for_tier(tier),
            cooldown=self.can_spend(user_id),
            banked_weeks=self.get_banked_weeks(user_id),
        )

    # --- Treats ---

    def get_last_treat(self, user_id: int) -> Optional[LastTreatRecord]:
        state = self._find_state(user_id)
        if not state or not state.last_treat_id:
            return None
        return LastTreatRecord(id=state.last_treat_id, name=state.last_treat_name, date=state.last_treat_date)

    def can_spend(self, user_id: int) -> CooldownDecision:
        return rewards.can_spend_treat(self.get_last_treat(user_id), self.clock.now())

    def spend_treat(self, user_id: int, treat: Treat) -> LastTreatRecord:
        """
        Records the treat as the last one, appends it to the treat history and
        resets banked weeks, all in one commit. Performs no eligibility checks.
        """
        now = self.clock.now()
        with self._transaction("spend_treat"):
            state = self._get_state(user_id)
            state.last_treat_id = treat.id
            state.last_treat_name = treat.name
            state.last_treat_date = now
            state.banked_weeks = 0

            self.db.add(TreatRedemption(
                user_id=user_id,
                treat_id=treat.id,
                name=treat.name,
                category=treat.category.value,
                description=treat.description,
                date=now,
            ))

        logger.info(f"User {user_id} spent treat '{treat.id}'")
        return LastTreatRecord(id=treat.id, name=treat.name, date=now)

    def redeem_treat(self, user_id: int, treat_id: str) -> RedemptionResult:
        """Eligibility check plus spend, under one lock hold. Refusals are results, not errors."""
        with self.lock:
            treat = rewards.find_treat(treat_id)
            if not treat:
                return RedemptionResult(status=RedemptionStatus.UNKNOWN_TREAT,
                                        banked_weeks=self.get_banked_weeks(user_id))

            stats = self.get_weekly_stats(user_id)
            tier = weekly_ledger.get_weekly_tier(stats.total_minutes)
            if not rewards.is_unlocked(treat, tier):
                return RedemptionResult(status=RedemptionStatus.INSUFFICIENT_TIER, treat=treat, tier=tier,
                                        banked_weeks=self.get_banked_weeks(user_id))

            cooldown = self.can_spend(user_id)
            if not cooldown.allowed:
                return RedemptionResult(status=RedemptionStatus.COOLDOWN_ACTIVE, treat=treat, tier=tier,
                                        cooldown=cooldown, banked_weeks=self.get_banked_weeks(user_id))

            self.spend_treat(user_id, treat)
            return RedemptionResult(status=RedemptionStatus.SPENT, treat=treat, tier=tier,
                                    cooldown=cooldown, banked_weeks=0)

    def get_treat_history(self, user_id: int) -> List[TreatHistoryEntry]:
        rows = self.db.query(TreatRedemption).filter(
            TreatRedemption.user_id == user_id
        ).order_by(TreatRedemption.date, TreatRedemption.id).all()
        return [TreatHistoryEntry.model_validate(r) for r in rows]

    # --- Banking ---

    def get_banked_weeks(self, user_id: int) -> int:
        state = self._find_state(user_id)
        return state.banked_weeks if state else 0

    def bank_week(self, user_id: int) -> BankResult:
        now = self.clock.now()
        with self._transaction("bank_week"):
            state = self._get_state(user_id)
            banked, entry = rewards.bank_week(state.banked_weeks, now)
            state.banked_weeks = banked
            self.db.add(BankedWeek(user_id=user_id, date=entry.date, week_number=entry.week_number))

        logger.info(f"User {user_id} banked ISO week {entry.week_number} (total {banked})")
        return BankResult(banked_weeks=banked, entry=entry)

    def get_bank_history(self, user_id: int) -> List[BankHistoryEntry]:
        rows = self.db.query(BankedWeek).filter(
            BankedWeek.user_id == user_id
        ).order_by(BankedWeek.date, BankedWeek.id).all()
        return [BankHistoryEntry.model_validate(r) for r in rows]
