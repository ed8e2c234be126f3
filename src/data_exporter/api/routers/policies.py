"""
data_exporter.api.routers.policies

Policy endpoints.

Responsibilities:
- Create a policy (validation errors become 400 with the message verbatim).
- Read all policies, a single policy, or an export filtered by start date.
"""

from __future__ import annotations

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from data_exporter.api.deps import policy_service
from data_exporter.schemas import PolicyCreate, PolicyRead
from data_exporter.services.errors import PolicyValidationError
from data_exporter.services.policy_service import PolicyService

router = APIRouter(prefix="/policies", tags=["policies"])


@router.post("", response_model=PolicyRead)
async def post_policies(
    body: PolicyCreate,
    svc: PolicyService = Depends(policy_service),
) -> PolicyRead:
    try:
        return await svc.create_policy(body)
    except PolicyValidationError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.get("", response_model=list[PolicyRead])
async def get_policies(svc: PolicyService = Depends(policy_service)) -> list[PolicyRead]:
    return await svc.read_policies()


@router.post("/export", response_model=list[PolicyRead])
async def export_data(
    start_date: date | datetime = Query(alias="startDate"),
    end_date: date | datetime = Query(alias="endDate"),
    svc: PolicyService = Depends(policy_service),
) -> list[PolicyRead]:
    return await svc.read_policies_filtered_by_date_range(
        _calendar_date(start_date), _calendar_date(end_date)
    )


def _calendar_date(value: date | datetime) -> date:
    # Timestamps are accepted; only their calendar day takes part in the filter.
    return value.date() if isinstance(value, datetime) else value


@router.get("/{policy_id}", response_model=PolicyRead)
async def get_policy(
    policy_id: int,
    svc: PolicyService = Depends(policy_service),
) -> PolicyRead:
    policy = await svc.read_policy(policy_id)
    if policy is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Policy not found")
    return policy


# --- Module Notes -----------------------------------------------------------
# `/export` is a POST for compatibility with existing clients; it has no side effects.
