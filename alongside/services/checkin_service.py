"""
Check-in history and burnout detection.
Keeps the last 30 check-ins per user and looks for patterns of low energy,
low mood, poor sleep and pain over the most recent week.
"""
import logging
from typing import Callable, List, Sequence

from sqlalchemy.orm import Session

from alongside.models.checkin import CheckinLog
from alongside.schemas.checkin import BurnoutReport, CheckinContext, CheckinRecord
from alongside.utils.clock import Clock

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 30
BURNOUT_WINDOW = 7
MIN_HISTORY_FOR_BURNOUT = 3

ADAPTATION_MESSAGES = {
    "high": "You've been running on low reserves lately. Today, we're prioritising rest and gentle "
            "movement. Your wellbeing matters more than any workout goal.",
    "moderate": "I've noticed your energy and mood have been lower recently. Let's keep today's "
                "workout gentle and restorative.",
    "low": "You might be feeling a bit depleted. I'll suggest lighter options today.",
}


def average_condition_pain(context: CheckinContext) -> int:
    if not context.conditions:
        return 0
    total = sum(c.severity for c in context.conditions)
    return int(total / len(context.conditions) + 0.5)


def _max_consecutive(history: Sequence[CheckinRecord], predicate: Callable[[CheckinRecord], bool]) -> int:
    longest = current = 0
    for record in history:
        if predicate(record):
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def detect_burnout(history: Sequence[CheckinRecord]) -> BurnoutReport:
    if len(history) < MIN_HISTORY_FOR_BURNOUT:
        return BurnoutReport()

    patterns = []
    score = 0

    if _max_consecutive(history, lambda r: r.energy <= 3) >= 3:
        patterns.append("consecutive-low-energy")
        score += 2

    if sum(r.energy for r in history) / len(history) < 4:
        patterns.append("low-energy-trend")
        score += 1

    if _max_consecutive(history, lambda r: r.mood <= 4) >= 3:
        patterns.append("consecutive-low-mood")
        score += 2

    if len([r for r in history if r.sleep_quality is not None and r.sleep_quality <= 2]) >= 3:
        patterns.append("poor-sleep-pattern")
        score += 1

    if len([r for r in history if r.avg_condition_pain >= 6]) >= 3:
        patterns.append("pain-flare")
        score += 2

    if len([r for r in history if r.energy <= 3 and r.mood <= 4]) >= 2:
        patterns.append("energy-mood-crash")
        score += 3

    if score >= 5:
        severity = "high"
    elif score >= 3:
        severity = "moderate"
    else:
        severity = "low"

    detected = bool(patterns)
    return BurnoutReport(
        detected=detected,
        patterns=patterns,
        severity=severity,
        mode="recovery" if detected else "normal",
        message=ADAPTATION_MESSAGES[severity] if detected else None,
    )


class CheckinService:
    def __init__(self, db: Session, clock: Clock):
        self.db = db
        self.clock = clock

    def record_checkin(self, user_id: int, context: CheckinContext, skipped: bool = False) -> CheckinRecord:
        log = CheckinLog(
            user_id=user_id,
            date=self.clock.now().date(),
            energy=context.energy,
            mood=context.mood,
            sleep_quality=context.sleep_quality,
            avg_condition_pain=average_condition_pain(context),
            skipped=skipped,
        )
        try:
            self.db.add(log)
            self.db.flush()

            # Keep only the most recent records
            stale = self.db.query(CheckinLog).filter(
                CheckinLog.user_id == user_id
            ).order_by(CheckinLog.date.desc(), CheckinLog.id.desc()).offset(HISTORY_LIMIT).all()
            for row in stale:
                self.db.delete(row)

            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to record check-in for user {user_id}: {e}")
            raise

        return CheckinRecord.model_validate(log)

    def get_checkin_history(self, user_id: int, days: int = BURNOUT_WINDOW) -> List[CheckinRecord]:
        """Most recent `days` check-ins, oldest first."""
        rows = self.db.query(CheckinLog).filter(
            CheckinLog.user_id == user_id
        ).order_by(CheckinLog.date.desc(), CheckinLog.id.desc()).limit(days).all()
        return [CheckinRecord.model_validate(r) for r in reversed(rows)]

    def get_burnout_adaptation(self, user_id: int) -> BurnoutReport:
        report = detect_burnout(self.get_checkin_history(user_id, BURNOUT_WINDOW))
        if report.detected:
            logger.info(f"Burnout patterns for user {user_id}: {report.patterns} ({report.severity})")
        return report
