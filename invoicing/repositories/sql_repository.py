"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError

from invoicing.db.models import Invoice, User
from invoicing.db.session import Database


class DuplicateUserError(Exception):
    """Raised when a unique constraint on ``users`` rejects an insert."""

    def __init__(self, field: str):
        super().__init__(f"User already exists with this {field}.")
        self.field = field


class InvoiceNotFoundError(LookupError):
    def __init__(self, invoice_id: str):
        super().__init__(f"Invoice {invoice_id!r} not found")
        self.invoice_id = invoice_id


class SQLRepository:
    """CRUD helpers wrapping the SQLAlchemy session."""

    def __init__(self, database: Database):
        self.database = database

    # -------------------------- users --------------------------
    def get_user_by_email(self, email: str) -> Optional[User]:
        with self.database.session() as session:
            stmt = select(User).where(User.email == email)
            return session.execute(stmt).scalar_one_or_none()

    def create_user(self, email: str, password_hash: str, name: str | None = None) -> User:
        """
        Insert a user in a single statement.

        Uniqueness is left to the storage constraints; a violation is reported
        as DuplicateUserError naming the clashing column (name wins over email).
        """
        entity = User(name=name, email=email, password=password_hash)
        with self.database.session() as session:
            session.add(entity)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                if name and self._exists(User.name, name):
                    raise DuplicateUserError("name") from None
                if self._exists(User.email, email):
                    raise DuplicateUserError("email") from None
                raise
            session.refresh(entity)
            return entity

    def update_user_password(self, user_id: str, password_hash: str) -> None:
        with self.database.session() as session:
            session.execute(update(User).where(User.id == user_id).values(password=password_hash))
            session.commit()

    def count_users(self) -> int:
        with self.database.session() as session:
            return session.execute(select(func.count()).select_from(User)).scalar_one()

    def _exists(self, column, value: str) -> bool:
        with self.database.session() as session:
            stmt = select(User.id).where(column == value).limit(1)
            return session.execute(stmt).first() is not None

    # -------------------------- invoices --------------------------
    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        with self.database.session() as session:
            return session.get(Invoice, invoice_id)

    def list_invoices(self, limit: int | None = None) -> list[Invoice]:
        with self.database.session() as session:
            stmt = select(Invoice).order_by(Invoice.date.desc(), Invoice.id)
            if limit:
                stmt = stmt.limit(limit)
            return list(session.execute(stmt).scalars().all())

    def create_invoice(self, customer_id: str, amount: int, status: str, invoice_date: date) -> Invoice:
        entity = Invoice(customer_id=customer_id, amount=amount, status=status, date=invoice_date)
        with self.database.session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity

    def update_invoice(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        with self.database.session() as session:
            stmt = (
                update(Invoice)
                .where(Invoice.id == invoice_id)
                .values(customer_id=customer_id, amount=amount, status=status)
            )
            result = session.execute(stmt)
            if result.rowcount == 0:
                session.rollback()
                raise InvoiceNotFoundError(invoice_id)
            session.commit()

    def delete_invoice(self, invoice_id: str) -> None:
        with self.database.session() as session:
            result = session.execute(delete(Invoice).where(Invoice.id == invoice_id))
            if result.rowcount == 0:
                session.rollback()
                raise InvoiceNotFoundError(invoice_id)
            session.commit()
