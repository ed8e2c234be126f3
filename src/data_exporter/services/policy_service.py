"""
data_exporter.services.policy_service

Policy lifecycle service (validation + transaction owner).

Responsibilities:
- Validate creation input against the ordered policy rules.
- Persist new policies and commit.
- Map stored policies (with their notes) to read-views.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import NoReturn

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from data_exporter.db.models import PREMIUM_SCALE, Policy
from data_exporter.db.repositories.policies import PolicyRepo
from data_exporter.observability.logging import get_logger
from data_exporter.schemas import NoteRead, PolicyCreate, PolicyRead
from data_exporter.services.clock import Clock, add_years, utc_today
from data_exporter.services.errors import PolicyValidationError

log = get_logger(__name__)

DUPLICATE_POLICY_NUMBER = "A policy with this policy number already exists."
POLICY_NUMBER_REQUIRED = "Policy number is required."
PREMIUM_NOT_POSITIVE = "Premium must be greater than zero."


def to_stored_premium(value: Decimal) -> Decimal:
    """
    Round `value` half-up to the stored scale. Precision grows with the
    magnitude so large premiums are never truncated.
    """

    ctx = Context(prec=max(28, value.adjusted() + PREMIUM_SCALE + 2), rounding=ROUND_HALF_UP)
    return value.quantize(Decimal(1).scaleb(-PREMIUM_SCALE), context=ctx)


def start_date_out_of_range(window_years: int) -> str:
    return (
        f"Start date must be within the last {window_years} years "
        f"or next {window_years} years."
    )


class PolicyService:
    def __init__(
        self,
        *,
        session: AsyncSession,
        clock: Clock = utc_today,
        window_years: int = 10,
    ) -> None:
        self._session = session
        self._clock = clock
        self._window_years = window_years
        self._policies = PolicyRepo(session)

    async def create_policy(self, payload: PolicyCreate) -> PolicyRead:
        """
        Checks run in a fixed order and the first failure wins. The duplicate
        check comes first, so an empty number that matches an existing one is
        reported as a duplicate.
        """

        if await self._policies.exists_by_policy_number(payload.policy_number):
            self._reject(payload, "duplicate", DUPLICATE_POLICY_NUMBER)
        if not payload.policy_number.strip():
            self._reject(payload, "missing_number", POLICY_NUMBER_REQUIRED)
        # Checked at the stored scale: 0.001 is stored as 0.00.
        premium = to_stored_premium(payload.premium)
        if premium <= 0:
            self._reject(payload, "premium", PREMIUM_NOT_POSITIVE)
        earliest, latest = self.start_date_window()
        if not earliest <= payload.start_date <= latest:
            self._reject(payload, "start_date", start_date_out_of_range(self._window_years))

        try:
            policy = await self._policies.insert(
                policy_number=payload.policy_number,
                premium=premium,
                start_date=payload.start_date,
            )
            await self._session.commit()
            await self._session.refresh(policy, attribute_names=["premium"])
        except IntegrityError as e:
            # Lost the race against a concurrent insert of the same number.
            await self._session.rollback()
            log.info(
                "policy_rejected",
                policy_number=payload.policy_number,
                reason="duplicate_constraint",
            )
            raise PolicyValidationError(DUPLICATE_POLICY_NUMBER) from e

        log.info("policy_created", policy_id=policy.id, policy_number=policy.policy_number)
        return to_read_view(policy)

    async def read_policies(self) -> list[PolicyRead]:
        return [to_read_view(p) for p in await self._policies.list_all()]

    async def read_policy(self, policy_id: int) -> PolicyRead | None:
        policy = await self._policies.get_by_id(policy_id)
        if policy is None:
            return None
        return to_read_view(policy)

    async def read_policies_filtered_by_date_range(
        self, start: date, end: date
    ) -> list[PolicyRead]:
        # An inverted range matches nothing; it is not an error.
        policies = await self._policies.list_by_date_range(start, end)
        return [to_read_view(p) for p in policies]

    def start_date_window(self) -> tuple[date, date]:
        today = self._clock()
        return add_years(today, -self._window_years), add_years(today, self._window_years)

    @staticmethod
    def _reject(payload: PolicyCreate, reason: str, message: str) -> NoReturn:
        log.info("policy_rejected", policy_number=payload.policy_number, reason=reason)
        raise PolicyValidationError(message)


def to_read_view(policy: Policy) -> PolicyRead:
    # Notes must already be loaded; the relationship refuses lazy loads.
    return PolicyRead(
        id=policy.id,
        policy_number=policy.policy_number,
        premium=policy.premium,
        start_date=policy.start_date,
        notes=[NoteRead(id=n.id, text=n.text, policy_id=n.policy_id) for n in policy.notes],
    )


# --- Module Notes -----------------------------------------------------------
# The duplicate pre-check and the insert are not atomic; the unique constraint on
# policies.policy_number closes that window and is mapped to the same error.
