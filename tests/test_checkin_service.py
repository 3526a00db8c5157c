import unittest
from datetime import date, datetime, timedelta
from unittest.mock import patch

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import alongside.models  # noqa: F401
from alongside.database import Base
from alongside.schemas.checkin import CheckinContext, CheckinRecord
from alongside.services.checkin_service import (
    ADAPTATION_MESSAGES,
    HISTORY_LIMIT,
    CheckinService,
    average_condition_pain,
    detect_burnout,
)
from alongside.utils.clock import FixedClock


def day(energy, mood, sleep=None, pain=0, offset=0):
    return CheckinRecord(date=date(2026, 10, 1) + timedelta(days=offset), energy=energy, mood=mood,
                         sleep_quality=sleep, avg_condition_pain=pain)


def series(*pairs):
    return [day(e, m, offset=i) for i, (e, m) in enumerate(pairs)]


class TestDetectBurnout(unittest.TestCase):

    def test_needs_three_checkins(self):
        report = detect_burnout(series((1, 1), (1, 1)))
        self.assertFalse(report.detected)
        self.assertEqual(report.mode, "normal")

    def test_healthy_week(self):
        report = detect_burnout(series((7, 7), (6, 8), (8, 6), (5, 5)))
        self.assertFalse(report.detected)
        self.assertEqual(report.patterns, [])
        self.assertIsNone(report.message)

    def test_crash_is_high_severity(self):
        report = detect_burnout(series((2, 3), (2, 3), (2, 3)))
        self.assertTrue(report.detected)
        self.assertEqual(report.patterns, [
            "consecutive-low-energy",
            "low-energy-trend",
            "consecutive-low-mood",
            "energy-mood-crash",
        ])
        self.assertEqual(report.severity, "high")
        self.assertEqual(report.mode, "recovery")
        self.assertEqual(report.message, ADAPTATION_MESSAGES["high"])

    def test_low_energy_streak_is_moderate(self):
        report = detect_burnout(series((3, 7), (3, 3), (3, 7)))
        self.assertEqual(report.patterns, ["consecutive-low-energy", "low-energy-trend"])
        self.assertEqual(report.severity, "moderate")

    def test_broken_streak_only_counts_trend(self):
        report = detect_burnout(series((2, 7), (2, 7), (6, 7), (2, 7), (2, 7)))
        self.assertEqual(report.patterns, ["low-energy-trend"])
        self.assertEqual(report.severity, "low")
        self.assertEqual(report.message, ADAPTATION_MESSAGES["low"])

    def test_poor_sleep(self):
        history = [day(6, 6, sleep=1, offset=i) for i in range(3)]
        report = detect_burnout(history)
        self.assertEqual(report.patterns, ["poor-sleep-pattern"])
        self.assertEqual(report.severity, "low")

    def test_missing_sleep_is_ignored(self):
        history = [day(6, 6, sleep=None, offset=i) for i in range(5)]
        self.assertFalse(detect_burnout(history).detected)

    def test_pain_flare(self):
        history = [day(6, 6, pain=7, offset=i) for i in range(3)]
        report = detect_burnout(history)
        self.assertEqual(report.patterns, ["pain-flare"])


class TestAverageConditionPain(unittest.TestCase):

    def test_no_conditions(self):
        self.assertEqual(average_condition_pain(CheckinContext()), 0)

    def test_rounds_half_up(self):
        context = CheckinContext(conditions=[{"area": "knee", "severity": 4}, {"area": "wrist", "severity": 5}])
        self.assertEqual(average_condition_pain(context), 5)


class TestCheckinService(unittest.TestCase):

    def setUp(self):
        engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
        Base.metadata.create_all(bind=engine)
        self.db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
        self.clock = FixedClock(datetime(2026, 10, 1, 8, 0))
        self.service = CheckinService(self.db, self.clock)

    def tearDown(self):
        self.db.close()

    def record_days(self, count, energy=6, mood=6):
        for _ in range(count):
            self.service.record_checkin(1, CheckinContext(energy=energy, mood=mood))
            self.clock.advance(timedelta(days=1))

    def test_record_checkin(self):
        context = CheckinContext(energy=4, mood=6, sleep_quality=2,
                                 conditions=[{"area": "Knee", "pain": 7}])
        record = self.service.record_checkin(1, context)
        self.assertEqual(record.date, date(2026, 10, 1))
        self.assertEqual(record.energy, 4)
        self.assertEqual(record.sleep_quality, 2)
        self.assertEqual(record.avg_condition_pain, 7)
        self.assertFalse(record.skipped)

    def test_history_oldest_first(self):
        for energy in (3, 5, 7):
            self.service.record_checkin(1, CheckinContext(energy=energy))
            self.clock.advance(timedelta(days=1))
        history = self.service.get_checkin_history(1)
        self.assertEqual([r.energy for r in history], [3, 5, 7])

    def test_history_window(self):
        self.record_days(10)
        history = self.service.get_checkin_history(1)
        self.assertEqual(len(history), 7)
        self.assertEqual(history[0].date, date(2026, 10, 4))
        self.assertEqual(history[-1].date, date(2026, 10, 10))

    def test_keeps_only_recent_records(self):
        self.record_days(HISTORY_LIMIT + 5)
        history = self.service.get_checkin_history(1, days=100)
        self.assertEqual(len(history), HISTORY_LIMIT)
        self.assertEqual(history[0].date, date(2026, 10, 6))

    def test_users_are_separate(self):
        self.service.record_checkin(1, CheckinContext(energy=2))
        self.service.record_checkin(2, CheckinContext(energy=9))
        self.assertEqual([r.energy for r in self.service.get_checkin_history(2)], [9])

    def test_burnout_adaptation(self):
        self.record_days(3, energy=2, mood=2)
        report = self.service.get_burnout_adaptation(1)
        self.assertTrue(report.detected)
        self.assertEqual(report.severity, "high")

    def test_failed_commit(self):
        with patch.object(self.db, "commit", side_effect=SQLAlchemyError("locked")):
            with self.assertRaises(SQLAlchemyError):
                self.service.record_checkin(1, CheckinContext())
        self.assertEqual(self.service.get_checkin_history(1), [])


if __name__ == '__main__':
    unittest.main()
