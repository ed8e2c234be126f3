"""
data_exporter.db.init_db

DB initialization helpers (dev/test convenience).

Responsibilities:
- Create tables for local development and tests.
- Write the fixed sample policies and notes when seeding is requested.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from data_exporter.db.base import Base
from data_exporter.db.repositories.notes import NoteRepo
from data_exporter.db.repositories.policies import PolicyRepo

# (policy_number, premium, start_date, note texts)
SAMPLE_POLICIES: tuple[tuple[str, Decimal, date, tuple[str, ...]], ...] = (
    (
        "HSCX1001",
        Decimal("200"),
        date(2024, 4, 1),
        ("First note for policy 1", "Second note for policy 1"),
    ),
    ("HSCX1002", Decimal("153"), date(2024, 4, 5), ("First note for policy 2",)),
    (
        "HSCX1003",
        Decimal("220"),
        date(2024, 3, 10),
        (
            "First note for policy 3",
            "Second note for policy 3",
            "Third note for policy 3",
        ),
    ),
    ("HSCX1004", Decimal("200"), date(2024, 5, 1), ()),
    ("HSCX1005", Decimal("100"), date(2024, 4, 1), ()),
)


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production relies on Alembic migrations.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed_sample_data(session: AsyncSession) -> int:
    """
    Insert the sample policies that are missing and return how many were added.

    Sample rows bypass service validation; their start dates are fixed and may
    drift outside the creation window over time.
    """

    policies = PolicyRepo(session)
    notes = NoteRepo(session)
    added = 0
    for policy_number, premium, start_date, texts in SAMPLE_POLICIES:
        if await policies.exists_by_policy_number(policy_number):
            continue
        policy = await policies.insert(
            policy_number=policy_number, premium=premium, start_date=start_date
        )
        for text in texts:
            await notes.add(policy_id=policy.id, text=text)
        added += 1
    await session.commit()
    return added
