import unittest

from alongside.schemas.exercise import EnergyLevel, Exercise
from alongside.services.credit_calculator import (
    MINIMUM_CREDITS,
    calculate_credits,
    credits_for_minutes,
    duration_in_minutes,
)


class TestCreditCalculator(unittest.TestCase):

    def test_short_exercise_is_floored_to_minimum(self):
        # 30s -> 0.5 min -> round(5 * 0.5 * 1.0) = 3 -> minimum 5
        ex = {"duration": 30, "durationUnit": "seconds", "energyRequired": "medium"}
        self.assertEqual(calculate_credits(ex), 5)

    def test_intensity_multipliers(self):
        self.assertEqual(calculate_credits({"duration": 10, "durationUnit": "minutes", "energyRequired": "high"}), 75)
        self.assertEqual(calculate_credits({"duration": 10, "durationUnit": "minutes", "energyRequired": "medium"}), 50)
        self.assertEqual(calculate_credits({"duration": 10, "durationUnit": "minutes", "energyRequired": "low"}), 25)
        self.assertEqual(calculate_credits({"duration": 2, "durationUnit": "minutes", "energyRequired": "veryHigh"}), 20)

    def test_unknown_intensity_uses_medium(self):
        self.assertEqual(calculate_credits({"duration": 2, "energyRequired": "extreme"}), 10)

    def test_rounds_half_up(self):
        # 5 * 3 * 0.5 = 7.5
        self.assertEqual(calculate_credits({"duration": 3, "durationUnit": "minutes", "energyRequired": "low"}), 8)

    def test_missing_fields_use_defaults(self):
        # 30 minutes at medium
        self.assertEqual(calculate_credits({}), 150)
        self.assertEqual(calculate_credits(None), MINIMUM_CREDITS)

    def test_snake_case_keys(self):
        ex = {"duration": 240, "duration_unit": "seconds", "energy_required": "high"}
        self.assertEqual(calculate_credits(ex), 30)

    def test_exercise_model(self):
        ex = Exercise(id="goblet", name="Goblet Squat", movementPattern="squat",
                      energyRequired="high", duration=90, durationUnit="seconds")
        # 1.5 min * 5 * 1.5 = 11.25
        self.assertEqual(calculate_credits(ex), 11)

    def test_actual_reps_for_rep_based_exercise(self):
        ex = {"reps": 10, "duration": 2, "durationUnit": "minutes", "energyRequired": "medium"}
        # 40 reps * 3s = 2 minutes
        self.assertEqual(calculate_credits(ex, actual_reps=40), 10)
        self.assertEqual(calculate_credits(ex, actual_reps=20), 5)

    def test_actual_reps_ignored_without_rep_scheme(self):
        ex = {"duration": 4, "durationUnit": "minutes", "energyRequired": "medium"}
        self.assertEqual(calculate_credits(ex, actual_reps=40), 20)

    def test_deterministic(self):
        ex = {"duration": 7, "durationUnit": "minutes", "energyRequired": "high"}
        results = {calculate_credits(ex) for _ in range(50)}
        self.assertEqual(len(results), 1)

    def test_never_below_minimum(self):
        for unit in ("seconds", "minutes"):
            for level in ("low", "medium", "high", "veryHigh"):
                for duration in (0.1, 1, 5, 29, 59):
                    credits = calculate_credits({"duration": duration, "durationUnit": unit, "energyRequired": level})
                    self.assertGreaterEqual(credits, MINIMUM_CREDITS)

    def test_duration_in_minutes_uses_actual_duration_in_own_unit(self):
        ex = {"duration": 30, "durationUnit": "seconds"}
        self.assertEqual(duration_in_minutes(ex), 0.5)
        self.assertEqual(duration_in_minutes(ex, actual_duration=90), 1.5)
        self.assertEqual(duration_in_minutes({"duration": 12}), 12.0)

    def test_credits_for_minutes(self):
        self.assertEqual(credits_for_minutes(2, EnergyLevel.HIGH), 15)
        self.assertEqual(credits_for_minutes(4, "medium"), 20)


if __name__ == '__main__':
    unittest.main()
