"""
Async SQLAlchemy repository for FitCoach plans and workout logs.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ..config import SETTINGS
from ..logs import LogEntry, WorkoutLog
from ..models import Plan
from .models import Base, StoredPlan, WorkoutLogRow

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session: async_sessionmaker[AsyncSession] | None = None


async def init_db(url: str | None = None) -> None:
    """
    Initialize the async database engine and sessionmaker, and create tables if needed.
    """
    global _engine, _session
    if _engine:
        return
    db_url = url or SETTINGS.DATABASE_URL
    if not db_url:
        logger.error("DATABASE_URL is required for DB initialization.")
        raise RuntimeError("DATABASE_URL is required")
    engine_kwargs: dict = {"echo": SETTINGS.DB_ECHO, "pool_pre_ping": True}
    if not make_url(db_url).drivername.startswith("sqlite"):
        engine_kwargs.update(pool_recycle=3600, pool_timeout=30, max_overflow=10, pool_size=20)
    _engine = create_async_engine(db_url, **engine_kwargs)
    _session = async_sessionmaker(_engine, expire_on_commit=False)
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized: %s", db_url)


def get_session() -> async_sessionmaker[AsyncSession]:
    """
    Get the async sessionmaker. Raises if DB is not initialized.
    """
    if not _session:
        raise RuntimeError("DB not initialized; call init_db() first")
    return _session


async def close_db() -> None:
    """Dispose of the database engine and reset session state."""

    global _engine, _session
    if _engine:
        await _engine.dispose()
    _engine = None
    _session = None


async def save_plan(user_id: int, plan: Plan) -> StoredPlan:
    """Store a generated plan for a user. Regenerated plans are new rows."""
    sessmaker = get_session()
    async with sessmaker() as s:
        row = StoredPlan(user_id=user_id, plan_id=plan.id, name=plan.name, plan=plan.to_dict())
        s.add(row)
        await s.commit()
        logger.info("Stored plan %s as row %s for user %s", plan.id, row.id, user_id)
        return row


async def get_plan(user_id: int, stored_plan_id: int) -> StoredPlan | None:
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(StoredPlan).where(
                StoredPlan.user_id == user_id, StoredPlan.id == stored_plan_id
            )
        )
        return res.scalar_one_or_none()


async def latest_plan(user_id: int) -> StoredPlan | None:
    """Return the user's newest stored plan."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(StoredPlan)
            .where(StoredPlan.user_id == user_id)
            .order_by(StoredPlan.id.desc())
            .limit(1)
        )
        return res.scalar_one_or_none()


async def list_plans(user_id: int) -> list[StoredPlan]:
    """Return a user's stored plans, newest first."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(StoredPlan)
            .where(StoredPlan.user_id == user_id)
            .order_by(StoredPlan.id.desc())
        )
        return list(res.scalars())


async def accept_plan(user_id: int, stored_plan_id: int) -> bool:
    """Mark one stored plan as accepted. Returns False when no such plan exists."""
    sessmaker = get_session()
    async with sessmaker() as s:
        res = await s.execute(
            select(StoredPlan).where(
                StoredPlan.user_id == user_id, StoredPlan.id == stored_plan_id
            )
        )
        row = res.scalar_one_or_none()
        if row is None:
            logger.info("Stored plan %s not found for user %s", stored_plan_id, user_id)
            return False
        row.accepted = True
        await s.commit()
        return True


async def save_workout_log(
    user_id: int, log: WorkoutLog, stored_plan_id: int | None = None
) -> WorkoutLogRow:
    sessmaker = get_session()
    async with sessmaker() as s:
        row = WorkoutLogRow(
            user_id=user_id,
            stored_plan_id=stored_plan_id,
            plan_id=log.plan_id,
            workout_id=log.workout_id,
            entries=[e.model_dump() for e in log.entries],
            created_at=log.created_at,
        )
        s.add(row)
        await s.commit()
        logger.debug("Stored log for workout %s (user %s)", log.workout_id, user_id)
        return row


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


async def list_workout_logs(
    user_id: int, stored_plan_id: int | None = None
) -> list[WorkoutLog]:
    """Return a user's workout logs, newest first, optionally for one stored plan."""
    sessmaker = get_session()
    async with sessmaker() as s:
        query = select(WorkoutLogRow).where(WorkoutLogRow.user_id == user_id)
        if stored_plan_id is not None:
            query = query.where(WorkoutLogRow.stored_plan_id == stored_plan_id)
        res = await s.execute(
            query.order_by(WorkoutLogRow.created_at.desc(), WorkoutLogRow.id.desc())
        )
        return [
            WorkoutLog(
                workout_id=row.workout_id,
                plan_id=row.plan_id,
                entries=[LogEntry.model_validate(e) for e in row.entries],
                created_at=_as_utc(row.created_at),
            )
            for row in res.scalars()
        ]
