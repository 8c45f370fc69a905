"""
Immutable value types for onboarding profiles and generated plans.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

DUMBBELLS = "dumbbells"
BANDS = "bands"
BODYWEIGHT = "bodyweight"
GYM = "gym"

EQUIPMENT_TAGS = frozenset({DUMBBELLS, BANDS, BODYWEIGHT, GYM})


@dataclass(frozen=True)
class OnboardingProfile:
    """
    Answers collected by onboarding.

    Only ``equipment`` and ``schedule`` drive plan generation; the remaining
    fields are carried along for the caller.
    """

    equipment: frozenset[str]
    schedule: int
    goal: str = "general"
    experience: str = "novice"
    unit: str = "kg"

    def __post_init__(self) -> None:
        if not isinstance(self.equipment, frozenset):
            object.__setattr__(self, "equipment", frozenset(self.equipment))

    @classmethod
    def create(cls, equipment: Iterable[str], schedule: int, **extra: Any) -> OnboardingProfile:
        return cls(equipment=frozenset(equipment), schedule=schedule, **extra)


@dataclass(frozen=True)
class SetTarget:
    reps: int
    target_effort: int

    def to_dict(self) -> dict[str, int]:
        return {"reps": self.reps, "target_effort": self.target_effort}


@dataclass(frozen=True)
class WorkoutExercise:
    exercise_id: str
    sets: tuple[SetTarget, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"exercise_id": self.exercise_id, "sets": [s.to_dict() for s in self.sets]}


@dataclass(frozen=True)
class Workout:
    """One concrete, uniquely identified training session within a plan."""

    id: str
    title: str
    exercises: tuple[WorkoutExercise, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "exercises": [e.to_dict() for e in self.exercises],
        }


@dataclass(frozen=True)
class Week:
    days: tuple[Workout, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"days": [d.to_dict() for d in self.days]}


@dataclass(frozen=True)
class Plan:
    """
    Two-week training plan.

    Week 1 is the base week, week 2 its progression. A plan is never edited
    in place; regenerating produces a new plan with new ids throughout.
    """

    id: str
    name: str
    weeks: tuple[Week, ...]

    def workout_ids(self) -> list[str]:
        return [d.id for w in self.weeks for d in w.days]

    def exercise_ids(self) -> set[str]:
        return {e.exercise_id for w in self.weeks for d in w.days for e in d.exercises}

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "weeks": [w.to_dict() for w in self.weeks]}

    @classmethod
    def from_dict(cls, data: dict[str, Any], validate: bool = False) -> Plan:
        """
        Rebuild a plan from its stored JSON form.

        With ``validate=True`` every exercise id must resolve in the current
        catalog, otherwise ``ExerciseNotFoundError`` is raised.
        """
        plan = cls(
            id=data["id"],
            name=data["name"],
            weeks=tuple(
                Week(
                    days=tuple(
                        Workout(
                            id=d["id"],
                            title=d["title"],
                            exercises=tuple(
                                WorkoutExercise(
                                    exercise_id=e["exercise_id"],
                                    sets=tuple(
                                        SetTarget(reps=s["reps"], target_effort=s["target_effort"])
                                        for s in e["sets"]
                                    ),
                                )
                                for e in d["exercises"]
                            ),
                        )
                        for d in w["days"]
                    )
                )
                for w in data["weeks"]
            ),
        )
        if validate:
            from .catalog import get_exercise

            for exercise_id in sorted(plan.exercise_ids()):
                get_exercise(exercise_id)
        return plan
