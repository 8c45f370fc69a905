"""
Static exercise catalog.

The catalog is a closed world: every exercise the templates reference is
listed here. Ids loaded from stored plans may be stale, so lookups raise
``ExerciseNotFoundError`` rather than returning ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from .errors import ExerciseNotFoundError
from .models import BANDS, BODYWEIGHT, DUMBBELLS, GYM

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseCatalogEntry:
    id: str
    name: str
    required_equipment: frozenset[str]  # usable with ANY of these
    muscle_group: str
    default_sets: int
    default_reps: int


def _entry(
    id: str, name: str, equipment: str, muscle_group: str, sets: int, reps: int
) -> ExerciseCatalogEntry:
    return ExerciseCatalogEntry(id, name, frozenset({equipment}), muscle_group, sets, reps)


EXERCISES: tuple[ExerciseCatalogEntry, ...] = (
    _entry("db_squat", "Dumbbell Squat", DUMBBELLS, "legs", 3, 8),
    _entry("db_press", "Dumbbell Bench Press", DUMBBELLS, "chest", 3, 8),
    _entry("db_row", "Dumbbell Row", DUMBBELLS, "back", 3, 10),
    _entry("plank", "Plank", BODYWEIGHT, "core", 3, 45),
    _entry("bw_squat", "Bodyweight Squat", BODYWEIGHT, "legs", 3, 12),
    _entry("pushup", "Push-up", BODYWEIGHT, "chest", 3, 10),
    _entry("row_band", "Band Row", BANDS, "back", 3, 12),
    _entry("ohp_db", "DB Overhead Press", DUMBBELLS, "shoulders", 3, 8),
    _entry("lat_pulldown", "Lat Pulldown (Gym)", GYM, "back", 3, 10),
    _entry("leg_press", "Leg Press (Gym)", GYM, "legs", 3, 10),
    _entry("bench", "Barbell Bench (Gym)", GYM, "chest", 3, 5),
    _entry("deadlift", "Deadlift (Gym)", GYM, "posterior", 3, 5),
)

CATALOG = MappingProxyType({e.id: e for e in EXERCISES})

if len(CATALOG) != len(EXERCISES):  # pragma: no cover - guarded at import
    raise RuntimeError("Duplicate exercise ids in catalog")


def get_exercise(exercise_id: str) -> ExerciseCatalogEntry:
    try:
        return CATALOG[exercise_id]
    except KeyError:
        logger.warning("Exercise id not in catalog: %s", exercise_id)
        raise ExerciseNotFoundError(exercise_id) from None


def is_bodyweight(exercise_id: str) -> bool:
    return BODYWEIGHT in get_exercise(exercise_id).required_equipment


def exercises_for_equipment(tags: Iterable[str]) -> list[ExerciseCatalogEntry]:
    """Return catalog entries usable with any of the owned equipment tags."""
    owned = set(tags)
    return [e for e in EXERCISES if e.required_equipment & owned]
