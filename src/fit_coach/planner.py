"""Deterministic two-week plan generation."""

from __future__ import annotations

import logging

from .ids import DEFAULT_ALLOCATOR, IdAllocator
from .models import OnboardingProfile, Plan, Week, Workout
from .progression import progress_workout
from .templates import DAY_ARCHETYPES, select_template, template_days

logger = logging.getLogger(__name__)

PLAN_NAME = "2-week baseline"


class PlanGenerator:
    """
    Build plans from onboarding profiles.

    Output depends only on the profile and the allocator state, so two
    generators with identically seeded allocators produce identical plans.
    """

    def __init__(self, allocator: IdAllocator | None = None):
        self.allocator = allocator or DEFAULT_ALLOCATOR

    def build_day(self, archetype: str) -> Workout:
        day = DAY_ARCHETYPES[archetype]
        return Workout(
            id=self.allocator.next_id("wo"), title=day.title, exercises=day.build_exercises()
        )

    def generate(self, profile: OnboardingProfile) -> Plan:
        template = select_template(profile)
        week1 = tuple(self.build_day(a) for a in template_days(template, profile.schedule))
        week2 = tuple(progress_workout(w, self.allocator) for w in week1)
        plan = Plan(
            id=self.allocator.next_id("plan"),
            name=PLAN_NAME,
            weeks=(Week(days=week1), Week(days=week2)),
        )
        logger.info(
            "Generated plan %s: template=%s days_per_week=%s", plan.id, template, len(week1)
        )
        return plan


def generate_plan(profile: OnboardingProfile, allocator: IdAllocator | None = None) -> Plan:
    return PlanGenerator(allocator).generate(profile)
