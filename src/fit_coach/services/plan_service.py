"""
Service for plan creation, workout logging and adherence.
"""

from __future__ import annotations

import logging

from ..adherence import weekly_adherence
from ..catalog import CATALOG
from ..db import repo
from ..db.models import StoredPlan
from ..ids import IdAllocator
from ..logs import WorkoutLog
from ..models import OnboardingProfile, Plan
from ..planner import PlanGenerator


class PlanService:
    """Service tying the plan generator to the persistence store."""

    def __init__(self, allocator: IdAllocator | None = None):
        self.generator = PlanGenerator(allocator)

    async def create_plan(self, user_id: int, profile: OnboardingProfile) -> StoredPlan:
        """
        Generate a fresh plan and store it. Used for both first plans and regeneration.

        The returned row's ``id`` is the durable key for the plan; use
        ``to_plan()`` for the plan itself.
        """
        plan = self.generator.generate(profile)
        return await repo.save_plan(user_id, plan)

    async def accept_plan(self, user_id: int, stored_plan_id: int) -> bool:
        return await repo.accept_plan(user_id, stored_plan_id)

    async def log_workout(self, user_id: int, stored_plan_id: int, log: WorkoutLog) -> None:
        await repo.save_workout_log(user_id, log, stored_plan_id=stored_plan_id)
        logging.info(
            "Logged workout %s of stored plan %s for user %s",
            log.workout_id,
            stored_plan_id,
            user_id,
        )

    async def current_adherence(self, user_id: int, profile: OnboardingProfile) -> float:
        """Adherence of the user's newest plan against the logs written for it."""
        stored = await repo.latest_plan(user_id)
        if stored is None:
            logging.debug("No stored plan for user %s", user_id)
            return 0.0
        logs = await repo.list_workout_logs(user_id, stored_plan_id=stored.id)
        return weekly_adherence(stored.to_plan(), logs, profile.schedule)

    def render_plan_message(self, plan: Plan) -> str:
        """Render a plan as plain text, one block per week."""
        lines: list[str] = [plan.name]
        for week_no, week in enumerate(plan.weeks, start=1):
            lines.append("")
            lines.append(f"Week {week_no}")
            for day_no, workout in enumerate(week.days, start=1):
                lines.append(f"Day {day_no} — {workout.title}")
                for ex in workout.exercises:
                    entry = CATALOG.get(ex.exercise_id)
                    name = entry.name if entry else ex.exercise_id
                    if ex.sets:
                        first = ex.sets[0]
                        lines.append(
                            f"• {name}: {len(ex.sets)}×{first.reps} @ RPE {first.target_effort}"
                        )
                    else:
                        lines.append(f"• {name}")
        return "\n".join(lines)
