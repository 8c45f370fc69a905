"""
Training templates and day archetypes as immutable data tables.

Selection and assembly live in :mod:`fit_coach.planner`; editing a day
here does not require touching that code.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from .models import BANDS, BODYWEIGHT, DUMBBELLS, OnboardingProfile, SetTarget, WorkoutExercise

logger = logging.getLogger(__name__)

FULL_BODY_3D = "full_body_3d"
UPPER_LOWER_4D = "upper_lower_4d"

MINIMAL_EQUIPMENT = frozenset({DUMBBELLS, BANDS, BODYWEIGHT})

MIN_DAYS = 3
MAX_DAYS = 4


@dataclass(frozen=True)
class ExerciseSlot:
    exercise_id: str
    set_count: int
    reps: int
    effort: int

    def build(self) -> WorkoutExercise:
        target = SetTarget(reps=self.reps, target_effort=self.effort)
        return WorkoutExercise(exercise_id=self.exercise_id, sets=(target,) * self.set_count)


@dataclass(frozen=True)
class DayArchetype:
    title: str
    slots: tuple[ExerciseSlot, ...]

    def build_exercises(self) -> tuple[WorkoutExercise, ...]:
        return tuple(slot.build() for slot in self.slots)


_PLANK = ExerciseSlot("plank", 3, 45, 6)

DAY_ARCHETYPES = MappingProxyType(
    {
        "full_body_a": DayArchetype(
            "Full Body A",
            (
                ExerciseSlot("db_squat", 3, 8, 7),
                ExerciseSlot("db_press", 3, 8, 7),
                ExerciseSlot("db_row", 3, 10, 7),
                _PLANK,
            ),
        ),
        "full_body_b": DayArchetype(
            "Full Body B",
            (
                ExerciseSlot("bw_squat", 3, 12, 6),
                ExerciseSlot("ohp_db", 3, 8, 7),
                ExerciseSlot("row_band", 3, 12, 7),
                _PLANK,
            ),
        ),
        "upper": DayArchetype(
            "Upper",
            (
                ExerciseSlot("bench", 3, 5, 7),
                ExerciseSlot("lat_pulldown", 3, 10, 7),
                ExerciseSlot("ohp_db", 3, 8, 7),
                _PLANK,
            ),
        ),
        "lower": DayArchetype(
            "Lower",
            (
                ExerciseSlot("leg_press", 3, 10, 7),
                ExerciseSlot("deadlift", 3, 5, 7),
                ExerciseSlot("bw_squat", 3, 12, 6),
                _PLANK,
            ),
        ),
    }
)

TEMPLATES = MappingProxyType(
    {
        FULL_BODY_3D: ("full_body_a", "full_body_b", "full_body_a"),
        UPPER_LOWER_4D: ("upper", "lower", "upper", "lower"),
    }
)


def select_template(profile: OnboardingProfile) -> str:
    """Full body only when no gym equipment is owned and at most 3 days are wanted."""
    minimal = all(tag in MINIMAL_EQUIPMENT for tag in profile.equipment)
    template = FULL_BODY_3D if minimal and profile.schedule <= 3 else UPPER_LOWER_4D
    logger.debug(
        "Selected template %s: equipment=%s schedule=%s",
        template,
        sorted(profile.equipment),
        profile.schedule,
    )
    return template


def day_count(schedule: int) -> int:
    # schedule is only loosely honored: weeks always have 3 or 4 days
    return min(MAX_DAYS, max(MIN_DAYS, schedule))


def template_days(template: str, schedule: int) -> tuple[str, ...]:
    return TEMPLATES[template][: day_count(schedule)]
