"""Week-to-week progression of a workout's primary exercise."""

from __future__ import annotations

import logging
from dataclasses import replace

from .catalog import is_bodyweight
from .ids import IdAllocator
from .models import SetTarget, Workout, WorkoutExercise

logger = logging.getLogger(__name__)

BODYWEIGHT_REP_JUMP = 2
EFFORT_CAP = 8
EFFORT_JUMP = 0


def progress_exercise(exercise: WorkoutExercise) -> WorkoutExercise:
    """
    Progress a primary exercise by one week.

    Bodyweight movements gain reps on the first set only. Weighted movements
    gain one extra set copied from the first set, with effort capped at 8.
    """
    if not exercise.sets:
        return exercise
    first = exercise.sets[0]
    if is_bodyweight(exercise.exercise_id):
        logger.debug("Progressing %s: +%s reps on set 1", exercise.exercise_id, BODYWEIGHT_REP_JUMP)
        bumped = replace(first, reps=first.reps + BODYWEIGHT_REP_JUMP)
        return replace(exercise, sets=(bumped, *exercise.sets[1:]))

    logger.debug("Progressing %s: +1 set", exercise.exercise_id)
    effort = min(EFFORT_CAP, first.target_effort + EFFORT_JUMP)
    extra = SetTarget(reps=first.reps, target_effort=effort)
    return replace(exercise, sets=(*exercise.sets, extra))


def progress_workout(workout: Workout, allocator: IdAllocator) -> Workout:
    """Return next week's occurrence of ``workout`` under a freshly minted id."""
    exercises = workout.exercises
    if exercises:
        exercises = (progress_exercise(exercises[0]), *exercises[1:])
    return Workout(id=allocator.next_id("wo"), title=workout.title, exercises=exercises)
