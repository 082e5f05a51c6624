"""Utility script to create the initial database schema."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from invoicing.core.config import get_settings
from .session import Database
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all(database: Database | None = None) -> None:
    db = database or Database.from_settings(get_settings())
    try:
        db.create_all()
    finally:
        if database is None:
            db.dispose()


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
