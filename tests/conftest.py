"""
tests.conftest

Shared fixtures.

Responsibilities:
- Provide an isolated in-memory database per test.
- Provide a fixed "today" so date-window checks do not depend on the wall clock.
- Seed the two-policy data set most service tests start from.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from data_exporter.db.init_db import init_db
from data_exporter.db.repositories.notes import NoteRepo
from data_exporter.db.repositories.policies import PolicyRepo
from data_exporter.db.session import create_engine, create_sessionmaker
from data_exporter.services.clock import fixed_clock
from data_exporter.services.policy_service import PolicyService
from data_exporter.settings import Settings

TODAY = date(2025, 6, 1)


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", database_url="sqlite+aiosqlite:///:memory:")


@pytest_asyncio.fixture
async def engine(settings: Settings) -> AsyncIterator[AsyncEngine]:
    eng = create_engine(settings)
    await init_db(eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    async with create_sessionmaker(engine)() as s:
        yield s


@pytest.fixture
def service(session: AsyncSession) -> PolicyService:
    return PolicyService(session=session, clock=fixed_clock(TODAY))


@pytest_asyncio.fixture
async def seeded(session: AsyncSession) -> dict[str, int]:
    """
    TEST001 starts 2024-01-01 and has two notes; TEST002 starts 2024-06-01 and has none.
    Returns policy ids keyed by policy number.
    """

    policies = PolicyRepo(session)
    first = await policies.insert(
        policy_number="TEST001", premium=Decimal("100"), start_date=date(2024, 1, 1)
    )
    second = await policies.insert(
        policy_number="TEST002", premium=Decimal("200"), start_date=date(2024, 6, 1)
    )
    notes = NoteRepo(session)
    await notes.add(policy_id=first.id, text="Note 1")
    await notes.add(policy_id=first.id, text="Note 2")
    await session.commit()
    return {"TEST001": first.id, "TEST002": second.id}
