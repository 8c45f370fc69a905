#!/usr/bin/env python3
"""
Reset database script for local development.
This script will drop all tables and recreate them with the current schema.
"""

import asyncio
import os
import sys
from pathlib import Path

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Set default environment variables for local development
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./local_dev.db")

from fit_coach.db import repo
from fit_coach.db.models import Base


async def reset_database():
    """Reset the database by dropping all tables and recreating them."""
    print("🔄 Resetting database...")

    await repo.init_db()

    engine = repo._engine
    if not engine:
        print("❌ Failed to initialize database engine")
        return

    async with engine.begin() as conn:
        print("🗑️  Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)

        print("🏗️  Creating tables from models...")
        await conn.run_sync(Base.metadata.create_all)

    for table in Base.metadata.sorted_tables:
        print(f"   - {table.name}")
    print("✅ Database reset complete!")

    await repo.close_db()


if __name__ == "__main__":
    asyncio.run(reset_database())
