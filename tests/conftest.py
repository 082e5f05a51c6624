from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import pytest

# Make the invoicing package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from invoicing.core.config import get_settings  # noqa: E402
from invoicing.core.revalidation import RevalidationRegistry  # noqa: E402
from invoicing.db import models  # noqa: E402,F401  # register tables on the metadata
from invoicing.db.session import Database  # noqa: E402
from invoicing.repositories.sql_repository import SQLRepository  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Settings pointing at a temporary SQLite file, independent of the host env."""
    for var in ("POSTGRES_URL", "DATABASE_URL", "SIGNUP_REQUIRES_NAME", "LOGIN_PATH", "AFTER_LOGIN_PATH", "INVOICES_PATH"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    base = get_settings()
    get_settings.cache_clear()
    return dataclasses.replace(base, database_url=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture()
def database(settings):
    db = Database.from_settings(settings)
    db.drop_all()
    db.create_all()

    yield db

    try:
        db.drop_all()
    finally:
        db.dispose()


@pytest.fixture()
def repository(database):
    return SQLRepository(database)


@pytest.fixture()
def revalidation():
    return RevalidationRegistry()
