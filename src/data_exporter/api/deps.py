"""
data_exporter.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the clock.
- Build a request-scoped PolicyService.
- Encapsulate app.state access patterns (engine/sessionmaker/clock).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from data_exporter.services.clock import Clock
from data_exporter.services.policy_service import PolicyService
from data_exporter.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app is built from an explicit Settings object; reuse it rather than env.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # The sessionmaker is created on app startup in `data_exporter.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


def clock_dep(request: Request) -> Clock:
    return request.app.state.clock  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def policy_service(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
    clock: Clock = Depends(clock_dep),
) -> PolicyService:
    return PolicyService(
        session=session,
        clock=clock,
        window_years=settings.start_date_window_years,
    )
