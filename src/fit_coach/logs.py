"""
Workout log models.

Logs arrive from callers, so unlike the plan value types they are validated
with pydantic.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from .models import Workout


class LogEntry(BaseModel):
    exercise_id: str
    set: int = Field(..., ge=1, description="1-based set number")
    weight: float = Field(0.0, ge=0)
    reps: int = Field(..., ge=0)
    rpe: float = Field(..., ge=0, le=10)
    notes: str | None = None


class WorkoutLog(BaseModel):
    workout_id: str
    entries: list[LogEntry]
    plan_id: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


def entries_from_workout(workout: Workout) -> list[LogEntry]:
    """Pre-fill one entry per target set with zero weight."""
    return [
        LogEntry(
            exercise_id=ex.exercise_id,
            set=i + 1,
            weight=0,
            reps=target.reps,
            rpe=target.target_effort,
        )
        for ex in workout.exercises
        for i, target in enumerate(ex.sets)
    ]
