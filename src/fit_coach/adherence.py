"""Adherence statistics computed from a plan and the user's logs."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .logs import WorkoutLog
from .models import Plan

logger = logging.getLogger(__name__)


def weekly_adherence(plan: Plan | None, logs: Iterable[WorkoutLog], schedule: int) -> float:
    """
    Fraction of this week's scheduled workouts that have a log, capped at 1.

    Only week 1 occurrences count; scheduled days are the smaller of the
    plan's week length and the user's requested schedule.
    """
    if plan is None or not plan.weeks:
        return 0.0
    days = plan.weeks[0].days
    scheduled = min(len(days), schedule or 0)
    if scheduled <= 0:
        return 0.0
    week_ids = {d.id for d in days}
    completed = sum(1 for log in logs if log.workout_id in week_ids)
    logger.debug("Adherence for %s: %s/%s", plan.id, completed, scheduled)
    return min(1.0, completed / scheduled)
