"""
data_exporter.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the policy schema must be queryable,
  which fails when migrations have not been applied.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from data_exporter.api.deps import db_session
from data_exporter.db.models import Policy

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, Any]:
    policies = (await session.execute(select(func.count()).select_from(Policy))).scalar_one()
    return {"status": "ready", "policies": policies}
