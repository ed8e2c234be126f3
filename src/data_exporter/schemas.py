"""
data_exporter.schemas

Request/response models shared by the service and API layers.

Responsibilities:
- Define the policy creation payload and the policy/note read-views.
- Keep the camelCase JSON shape while exposing snake_case attributes.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimals would otherwise be rendered as JSON strings.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PolicyCreate(_CamelModel):
    # Missing fields fall through to the service checks and their specific messages.
    policy_number: str = ""
    premium: Money = Decimal("0")
    start_date: date = date.min


class NoteRead(_CamelModel):
    id: int
    text: str
    policy_id: int


class PolicyRead(_CamelModel):
    id: int
    policy_number: str
    premium: Money
    start_date: date
    notes: list[NoteRead] = Field(default_factory=list)
