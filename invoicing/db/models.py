"""SQLAlchemy models for users and invoices."""
from __future__ import annotations

import uuid

from sqlalchemy import CheckConstraint, Column, Date, Integer, String, Text

from .session import Base

INVOICE_STATUSES = ("pending", "paid")


def _uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_uuid)
    name = Column(String(255), unique=True, nullable=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'paid')", name="invoices_status_check"),
    )

    id = Column(String(36), primary_key=True, default=_uuid)
    customer_id = Column(String(36), nullable=False, index=True)
    # minor currency units
    amount = Column(Integer, nullable=False)
    status = Column(String(16), nullable=False)
    date = Column(Date, nullable=False)
