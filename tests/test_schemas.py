import unittest

from pydantic import ValidationError

from alongside.schemas.checkin import CheckinContext, Condition, clamp
from alongside.schemas.economy import CompletionEvent, CompletionRequest, Tier
from alongside.schemas.exercise import EnergyLevel, Exercise, MovementPattern


class TestClamp(unittest.TestCase):

    def test_clamp(self):
        self.assertEqual(clamp(0, 1, 10, default=5), 1)
        self.assertEqual(clamp(11, 1, 10, default=5), 10)
        self.assertEqual(clamp("7", 1, 10, default=5), 7)
        self.assertEqual(clamp(None, 1, 10, default=5), 5)
        self.assertEqual(clamp("lots", 1, 10, default=5), 5)


class TestCheckinContext(unittest.TestCase):

    def test_defaults(self):
        context = CheckinContext()
        self.assertEqual((context.energy, context.mood), (5, 5))
        self.assertEqual(context.conditions, [])
        self.assertIsNone(context.sleep_quality)

    def test_out_of_range_is_clamped(self):
        context = CheckinContext(energy=0, mood=15, sleep_quality=9)
        self.assertEqual((context.energy, context.mood, context.sleep_quality), (1, 10, 5))

    def test_null_conditions(self):
        self.assertEqual(CheckinContext(conditions=None).conditions, [])

    def test_condition_aliases(self):
        condition = Condition.model_validate({"area": "  Lower-Back ", "pain": 12})
        self.assertEqual(condition.area, "lower-back")
        self.assertEqual(condition.severity, 10)

    def test_unreadable_severity_is_worst_case(self):
        self.assertEqual(Condition(area="knee", severity="bad").severity, 10)

    def test_blank_area_rejected(self):
        with self.assertRaises(ValidationError):
            Condition(area="   ", severity=8)
        with self.assertRaises(ValidationError):
            Condition.model_validate({"area": None, "pain": 8})

    def test_blank_conditions_dropped_from_context(self):
        context = CheckinContext(conditions=[{"area": " ", "pain": 9}, {"area": "Knee", "pain": 6}, {"pain": 7}])
        self.assertEqual([c.area for c in context.conditions], ["knee"])

    def test_frozen(self):
        context = CheckinContext(energy=3)
        with self.assertRaises(ValidationError):
            context.energy = 9


class TestExercise(unittest.TestCase):

    def test_camel_and_snake_keys(self):
        camel = Exercise.model_validate({"id": "a", "name": "A", "movementPattern": "hinge",
                                         "energyRequired": "high"})
        snake = Exercise.model_validate({"id": "a", "name": "A", "movement_pattern": "hinge",
                                         "energy_required": "high"})
        self.assertEqual(camel, snake)
        self.assertEqual(camel.movement_pattern, MovementPattern.HINGE)
        self.assertEqual(camel.energy_required, EnergyLevel.HIGH)

    def test_numeric_id_is_stringified(self):
        exercise = Exercise.model_validate({"id": 7, "name": "A", "movementPattern": "push",
                                            "energyRequired": "low"})
        self.assertEqual(exercise.id, "7")

    def test_contraindications_normalized(self):
        exercise = Exercise.model_validate({"id": "a", "name": "A", "movementPattern": "push",
                                            "energyRequired": "low", "contraindications": [" Wrist", ""]})
        self.assertEqual(exercise.contraindications, ["wrist"])

    def test_rejects_unknown_pattern(self):
        with self.assertRaises(ValidationError):
            Exercise.model_validate({"id": "a", "name": "A", "movementPattern": "dance",
                                     "energyRequired": "low"})

    def test_rep_based(self):
        exercise = Exercise(id="a", name="A", movement_pattern="squat", energy_required="low", reps=10)
        self.assertTrue(exercise.is_rep_based)


class TestEconomySchemas(unittest.TestCase):

    def test_completion_credits_floor(self):
        with self.assertRaises(ValidationError):
            CompletionEvent(exercise_id="a", date="2026-10-14T09:00:00", duration_minutes=1, credits=4)

    def test_completion_request_positive(self):
        with self.assertRaises(ValidationError):
            CompletionRequest(exercise_id="a", actual_duration=0)

    def test_tier_rank(self):
        self.assertEqual([t.rank for t in Tier], [0, 1, 2, 3, 4])


if __name__ == '__main__':
    unittest.main()
