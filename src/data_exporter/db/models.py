"""
data_exporter.db.models

Persistence schema for policies and their notes.

Responsibilities:
- Define ORM models:
  - Policy: an insurance policy identified by a unique policy number
  - Note: free text attached to exactly one policy
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from data_exporter.db.base import Base


# Premiums are stored with exactly this many decimal places and no precision cap.
PREMIUM_SCALE = 2


class Policy(Base):
    __tablename__ = "policies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Uniqueness is enforced here as well as by the service pre-check.
    policy_number: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    premium: Mapped[Decimal] = mapped_column(
        Numeric(scale=PREMIUM_SCALE, asdecimal=True), nullable=False
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    notes: Mapped[list[Note]] = relationship(
        back_populates="policy",
        cascade="all, delete-orphan",
        order_by="Note.id",
        lazy="raise",
    )


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False, default="")
    policy_id: Mapped[int] = mapped_column(
        ForeignKey("policies.id"), nullable=False, index=True
    )

    policy: Mapped[Policy] = relationship(back_populates="notes", lazy="raise")


# --- Module Notes -----------------------------------------------------------
# Relationships use lazy="raise": under AsyncSession an implicit lazy load would
# fail anyway, so repositories must load notes explicitly with selectinload.
