"""
Services layer for FitCoach business logic.
"""

from .plan_service import PlanService

__all__ = ["PlanService"]
