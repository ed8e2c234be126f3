from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from data_exporter.db.models import Note


class NoteRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, *, policy_id: int, text: str) -> Note:
        note = Note(policy_id=policy_id, text=text)
        self._session.add(note)
        await self._session.flush()
        return note

    async def list_for_policy(self, policy_id: int) -> list[Note]:
        stmt = select(Note).where(Note.policy_id == policy_id).order_by(Note.id)
        return list((await self._session.execute(stmt)).scalars().all())
