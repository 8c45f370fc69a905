"""
SQLAlchemy ORM models for FitCoach storage.

Plans and logs are stored as opaque JSON blobs. Generator ids restart with
every process, so rows are keyed by the ``stored_plans.id`` row id; the
generator's plan id is kept for display only.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..models import Plan


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class StoredPlan(Base):
    """A generated plan saved for a user."""

    __tablename__ = "stored_plans"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True)
    plan_id: Mapped[str] = mapped_column(String(64))  # generator id, not unique
    name: Mapped[str] = mapped_column(String(120))
    plan: Mapped[dict[str, Any]] = mapped_column(JSON)
    accepted: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    def to_plan(self) -> Plan:
        return Plan.from_dict(self.plan)

    def __repr__(self) -> str:
        return f"<StoredPlan id={self.id} user_id={self.user_id} plan_id={self.plan_id}>"


class WorkoutLogRow(Base):
    """Performed sets for one workout occurrence of a stored plan."""

    __tablename__ = "workout_logs"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, index=True)
    stored_plan_id: Mapped[int | None] = mapped_column(
        ForeignKey("stored_plans.id"), nullable=True, index=True
    )
    plan_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    workout_id: Mapped[str] = mapped_column(String(64), index=True)
    entries: Mapped[list[Any]] = mapped_column(JSON)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )

    def __repr__(self) -> str:
        return f"<WorkoutLogRow id={self.id} user_id={self.user_id} workout_id={self.workout_id}>"
