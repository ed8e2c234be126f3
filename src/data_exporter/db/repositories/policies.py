"""
data_exporter.db.repositories.policies

Repository for `Policy` entities.

Responsibilities:
- Insert policies and answer policy-number existence checks.
- Fetch policies with their notes eagerly loaded, singly or in bulk.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Select, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from data_exporter.db.models import Policy


class PolicyRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, *, policy_number: str, premium: Decimal, start_date: date) -> Policy:
        # A new policy never has notes; initialising the collection avoids a lazy load.
        policy = Policy(
            policy_number=policy_number,
            premium=premium,
            start_date=start_date,
            notes=[],
        )
        self._session.add(policy)
        await self._session.flush()
        return policy

    async def exists_by_policy_number(self, policy_number: str) -> bool:
        stmt = select(exists().where(Policy.policy_number == policy_number))
        return bool((await self._session.execute(stmt)).scalar())

    async def get_by_id(self, policy_id: int) -> Policy | None:
        return await self._session.get(
            Policy,
            policy_id,
            options=[selectinload(Policy.notes)],
            populate_existing=True,
        )

    async def list_all(self) -> list[Policy]:
        return list((await self._session.execute(self._with_notes())).scalars().all())

    async def list_by_date_range(self, start: date, end: date) -> list[Policy]:
        stmt = self._with_notes().where(Policy.start_date >= start, Policy.start_date <= end)
        return list((await self._session.execute(stmt)).scalars().all())

    @staticmethod
    def _with_notes() -> Select[tuple[Policy]]:
        # populate_existing refreshes notes on policies already in the identity map.
        return (
            select(Policy)
            .options(selectinload(Policy.notes))
            .order_by(Policy.id)
            .execution_options(populate_existing=True)
        )
