"""
tests.test_repositories

Storage-level behaviour: repositories, constraints and sample seeding.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from data_exporter.db.init_db import SAMPLE_POLICIES, seed_sample_data
from data_exporter.db.models import PREMIUM_SCALE, Policy
from data_exporter.db.repositories.notes import NoteRepo
from data_exporter.db.repositories.policies import PolicyRepo


@pytest.mark.asyncio
async def test_insert_assigns_increasing_ids(session) -> None:
    repo = PolicyRepo(session)

    a = await repo.insert(policy_number="A", premium=Decimal("1"), start_date=date(2024, 1, 1))
    b = await repo.insert(policy_number="B", premium=Decimal("2"), start_date=date(2024, 1, 2))

    assert 0 < a.id < b.id


@pytest.mark.asyncio
async def test_exists_by_policy_number(session, seeded: dict[str, int]) -> None:
    repo = PolicyRepo(session)

    assert await repo.exists_by_policy_number("TEST001") is True
    assert await repo.exists_by_policy_number("TEST003") is False


@pytest.mark.asyncio
async def test_policy_number_unique_constraint(session, seeded: dict[str, int]) -> None:
    with pytest.raises(IntegrityError):
        await PolicyRepo(session).insert(
            policy_number="TEST001", premium=Decimal("1"), start_date=date(2024, 1, 1)
        )
    await session.rollback()


@pytest.mark.asyncio
async def test_note_requires_existing_policy(session) -> None:
    with pytest.raises(IntegrityError):
        await NoteRepo(session).add(policy_id=12345, text="orphan")
    await session.rollback()


@pytest.mark.asyncio
async def test_notes_added_later_are_visible_on_reload(session, seeded: dict[str, int]) -> None:
    repo = PolicyRepo(session)
    await NoteRepo(session).add(policy_id=seeded["TEST002"], text="Late note")
    await session.commit()

    policy = await repo.get_by_id(seeded["TEST002"])

    assert policy is not None
    assert [n.text for n in policy.notes] == ["Late note"]


@pytest.mark.asyncio
async def test_list_for_policy_returns_only_that_policys_notes(
    session, seeded: dict[str, int]
) -> None:
    notes = await NoteRepo(session).list_for_policy(seeded["TEST001"])

    assert [n.text for n in notes] == ["Note 1", "Note 2"]
    assert await NoteRepo(session).list_for_policy(seeded["TEST002"]) == []


@pytest.mark.asyncio
async def test_list_by_date_range_orders_by_id(session, seeded: dict[str, int]) -> None:
    repo = PolicyRepo(session)
    await repo.insert(policy_number="EARLY", premium=Decimal("5"), start_date=date(2023, 1, 1))

    policies = await repo.list_by_date_range(date(2023, 1, 1), date(2024, 12, 31))

    assert [p.policy_number for p in policies] == ["TEST001", "TEST002", "EARLY"]


@pytest.mark.asyncio
async def test_seed_sample_data_populates_fixed_policies(session) -> None:
    added = await seed_sample_data(session)

    policies = await PolicyRepo(session).list_all()
    assert added == len(SAMPLE_POLICIES) == 5
    assert [p.policy_number for p in policies] == [
        "HSCX1001",
        "HSCX1002",
        "HSCX1003",
        "HSCX1004",
        "HSCX1005",
    ]
    assert [len(p.notes) for p in policies] == [2, 1, 3, 0, 0]
    assert policies[2].premium == Decimal("220")
    assert policies[2].start_date == date(2024, 3, 10)


@pytest.mark.asyncio
async def test_seed_sample_data_is_idempotent(session) -> None:
    await seed_sample_data(session)

    assert await seed_sample_data(session) == 0
    assert len(await PolicyRepo(session).list_all()) == 5


@pytest.mark.asyncio
async def test_unseeded_store_is_empty(session) -> None:
    assert await PolicyRepo(session).list_all() == []


def test_policy_columns_have_no_size_caps() -> None:
    columns = Policy.__table__.c

    assert columns.policy_number.type.length is None
    assert columns.premium.type.precision is None
    assert columns.premium.type.scale == PREMIUM_SCALE == 2


@pytest.mark.asyncio
async def test_seeded_notes_reference_their_policies(session) -> None:
    await seed_sample_data(session)

    policies = await PolicyRepo(session).list_all()
    for policy in policies:
        listed = await NoteRepo(session).list_for_policy(policy.id)
        assert [n.id for n in listed] == [n.id for n in policy.notes]
