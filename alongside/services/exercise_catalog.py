import json
import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from alongside.schemas.exercise import Exercise

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """
    Read-only, in-memory exercise library.
    Raw records are validated once here; a malformed record is skipped and logged,
    the rest of the catalog still loads.
    """

    def __init__(self, records: Iterable = ()):
        self._exercises: List[Exercise] = []
        self._by_id = {}
        self.skipped = 0

        for idx, raw in enumerate(records):
            try:
                exercise = raw if isinstance(raw, Exercise) else Exercise.model_validate(raw)
            except ValidationError as e:
                self.skipped += 1
                logger.warning(f"Skipping malformed exercise record #{idx}: {e.errors()}")
                continue

            if exercise.id in self._by_id:
                self.skipped += 1
                logger.warning(f"Skipping duplicate exercise id '{exercise.id}' (record #{idx})")
                continue

            self._exercises.append(exercise)
            self._by_id[exercise.id] = exercise

        logger.info(f"Exercise catalog loaded: {len(self._exercises)} exercises, {self.skipped} skipped")

    def __len__(self):
        return len(self._exercises)

    def __iter__(self):
        return iter(self._exercises)

    def get(self, exercise_id: str) -> Optional[Exercise]:
        return self._by_id.get(exercise_id)

    def get_exercises(self, movement_patterns=None, energy_levels=None) -> List[Exercise]:
        """All exercises in catalog order, optionally narrowed by pattern and energy level."""
        result = self._exercises
        if movement_patterns is not None:
            patterns = {getattr(p, "value", p) for p in movement_patterns}
            result = [e for e in result if e.movement_pattern.value in patterns]
        if energy_levels is not None:
            levels = {getattr(lvl, "value", lvl) for lvl in energy_levels}
            result = [e for e in result if e.energy_required.value in levels]
        return list(result)


def load_catalog(path: str) -> ExerciseCatalog:
    """
    Load a catalog file. Accepts either a bare list of records or
    {"exercises": [...]} / {"sources": [{"exercises": [...]}, ...]}.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read exercise catalog at {path}: {e}")
        return ExerciseCatalog([])

    if isinstance(data, dict):
        if "sources" in data:
            records = [rec for source in data["sources"] for rec in source.get("exercises", [])]
        else:
            records = data.get("exercises", [])
    else:
        records = data

    return ExerciseCatalog(records)
