"""
Coach Service
-------------
Builds the daily workout from a check-in.
1. Maps energy to a tier (low / medium / high) and its configuration.
2. Filters the catalog by allowed energy level and contraindications.
3. Scores survivors (pattern preference, mood, random jitter).
4. Fills each section of the tier's template from the ranked list,
   never reusing an exercise within one workout.
5. Picks a coach message.
"""
import logging
from typing import Dict, List, Optional

from alongside.schemas.checkin import CheckinContext, Condition
from alongside.schemas.exercise import Exercise
from alongside.schemas.workout import Workout, WorkoutSection
from alongside.services.credit_calculator import calculate_credits
from alongside.services.exercise_catalog import ExerciseCatalog
from alongside.utils.randomness import RandomSource

logger = logging.getLogger(__name__)

# Severity at which a contraindicated exercise is excluded
CONTRAINDICATION_SEVERITY = 5

PREFERRED_BONUS = 10
AVOIDED_PENALTY = 20
LOW_MOOD_GENTLE_BONUS = 5
JITTER = 5

WORKOUT_CONFIGS: Dict[str, dict] = {
    "low": {
        "name": "Gentle Recovery",
        "max_duration": 15,
        "max_exercises": 5,
        "preferred_patterns": ["recovery", "mobility", "stability"],
        "avoid_patterns": ["locomotion", "hinge"],
        "energy_levels": ["low"],
        "sections": [
            ("Breathwork", ["recovery"], 1),
            ("Gentle Movement", ["mobility", "stability"], 3),
        ],
    },
    "medium": {
        "name": "Balanced Session",
        "max_duration": 25,
        "max_exercises": 8,
        "preferred_patterns": ["stability", "squat", "push", "pull", "mobility"],
        "avoid_patterns": [],
        "energy_levels": ["low", "medium"],
        "sections": [
            ("Warm-Up", ["mobility"], 2),
            ("Main Set", ["squat", "push", "pull", "lunge", "stability"], 4),
            ("Cool Down", ["mobility", "recovery"], 2),
        ],
    },
    "high": {
        "name": "Full Energy",
        "max_duration": 35,
        "max_exercises": 10,
        "preferred_patterns": ["locomotion", "squat", "hinge", "push", "pull", "lunge"],
        "avoid_patterns": [],
        "energy_levels": ["low", "medium", "high"],
        "sections": [
            ("Warm-Up", ["mobility", "locomotion"], 2),
            ("Strength", ["squat", "hinge", "push", "pull", "lunge"], 5),
            ("Cardio Burst", ["locomotion"], 2),
            ("Cool Down", ["mobility", "recovery"], 2),
        ],
    },
}

COACH_MESSAGES: Dict[str, List[str]] = {
    "low_energy": [
        "Low energy today? Let's focus on gentle movement that will leave you feeling better, not depleted.",
        "Your body is asking for rest. These exercises will help without draining you further.",
        "Being kind to yourself on low-energy days is part of the process. Let's keep it gentle.",
    ],
    "low_mood": [
        "I hear you. Movement can help shift things, so we're keeping it light and achievable.",
        "Tough day? Small wins matter most right now. Every exercise you complete is a victory.",
        "Let's focus on feeling slightly better, not perfect. That's enough today.",
    ],
    "balanced": [
        "Good foundation to work with today. Let's build something solid.",
        "Steady energy is perfect for a balanced session. Ready when you are.",
        "Not too high, not too low. A great day for consistent progress.",
    ],
    "high_energy": [
        "Great energy today! Let's use it wisely with some solid work.",
        "You're feeling it today. Let's channel that into some good movement.",
        "High energy day! Perfect for pushing a little further than usual.",
    ],
    "recovery": [
        "Recovery mode activated. Your body needs this, and rest is productive.",
        "You've been running low for a while. Let's prioritise restoration today.",
        "Taking care of yourself isn't weakness. It's what makes everything else possible.",
    ],
}


def get_energy_tier(energy: int) -> str:
    if energy <= 3:
        return "low"
    if energy <= 6:
        return "medium"
    return "high"


def get_coach_message(energy: int, mood: int, rng: RandomSource) -> str:
    if energy <= 3 and mood <= 3:
        category = "recovery"
    elif mood <= 4:
        # Low mood takes priority over energy
        category = "low_mood"
    elif energy <= 3:
        category = "low_energy"
    elif energy >= 7:
        category = "high_energy"
    else:
        category = "balanced"
    return rng.choice(COACH_MESSAGES[category])


def is_unsafe(exercise: Exercise, conditions: List[Condition]) -> bool:
    """
    True when any condition at or above the severity threshold names an area
    that appears in one of the exercise's contraindication tags.
    """
    if not exercise.contraindications or not conditions:
        return False
    for cond in conditions:
        if cond.severity < CONTRAINDICATION_SEVERITY:
            continue
        if any(cond.area in contra for contra in exercise.contraindications):
            return True
    return False


def score_exercise(exercise: Exercise, config: dict, mood: int, rng: RandomSource) -> float:
    pattern = exercise.movement_pattern.value
    score = 0.0
    if pattern in config["preferred_patterns"]:
        score += PREFERRED_BONUS
    if pattern in config["avoid_patterns"]:
        score -= AVOIDED_PENALTY
    if mood <= 4 and exercise.energy_required.value == "low":
        score += LOW_MOOD_GENTLE_BONUS
    # Variety between otherwise tied candidates
    score += rng.random() * JITTER
    return score


def filter_candidates(exercises: List[Exercise], config: dict, conditions: List[Condition]) -> List[Exercise]:
    allowed = config["energy_levels"]
    return [
        ex for ex in exercises
        if ex.energy_required.value in allowed and not is_unsafe(ex, conditions)
    ]


def select_exercises(ranked: List[Exercise], patterns: List[str], count: int, used_ids: set) -> List[Exercise]:
    """Take up to `count` of the best-ranked exercises matching `patterns`; records picks in `used_ids`."""
    selected = []
    for ex in ranked:
        if len(selected) >= count:
            break
        if ex.movement_pattern.value not in patterns or ex.id in used_ids:
            continue
        selected.append(ex)
        used_ids.add(ex.id)
    return selected


def build_daily_workout(context: CheckinContext, catalog: ExerciseCatalog, rng: RandomSource) -> Optional[Workout]:
    """
    Returns None when there is nothing to build from (empty catalog, or every
    exercise filtered out). A short section is not an error; empty sections are dropped.
    """
    tier = get_energy_tier(context.energy)
    config = WORKOUT_CONFIGS[tier]

    all_exercises = catalog.get_exercises()
    if not all_exercises:
        logger.error("No exercises available in catalog")
        return None

    candidates = filter_candidates(all_exercises, config, context.conditions)
    if not candidates:
        logger.warning(f"No candidate exercises for tier '{tier}' after safety filtering")
        return None

    scored = [(score_exercise(ex, config, context.mood, rng), ex) for ex in candidates]
    # Stable: equal scores keep catalog order
    scored.sort(key=lambda pair: pair[0], reverse=True)
    ranked = [ex for _, ex in scored]

    used_ids = set()
    sections = []
    for name, patterns, count in config["sections"]:
        picked = select_exercises(ranked, patterns, count, used_ids)
        if picked:
            sections.append(WorkoutSection(name=name, exercises=picked))

    estimated = sum(calculate_credits(ex) for section in sections for ex in section.exercises)

    workout = Workout(
        name=config["name"],
        energy_tier=tier,
        coach_message=get_coach_message(context.energy, context.mood, rng),
        energy=context.energy,
        mood=context.mood,
        sections=sections,
        estimated_credits=estimated,
    )
    logger.info(
        f"Built '{workout.name}' workout: {len(workout.exercise_ids)} exercises "
        f"across {len(sections)} sections (energy={context.energy}, mood={context.mood})"
    )
    return workout
