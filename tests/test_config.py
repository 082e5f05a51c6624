from __future__ import annotations

import logging

import pytest
from sqlalchemy import inspect

from invoicing.core import config as core_config
from invoicing.core.logging import configure_logging
from invoicing.db.create_tables import create_all
from invoicing.db.session import Database, normalize_database_url


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("POSTGRES_URL", " postgres://u:p@db.example.com/app ")
    monkeypatch.setenv("SIGNUP_REQUIRES_NAME", "no")
    monkeypatch.setenv("INVOICES_PATH", "billing/")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()

    assert settings.database_url == "postgres://u:p@db.example.com/app"
    assert settings.database_sslmode == "require"
    assert settings.signup_requires_name is False
    assert settings.invoices_path == "/billing"
    assert settings.login_path == "/login"


def test_postgres_urls_use_psycopg_with_tls():
    assert normalize_database_url("postgres://u@h/db") == "postgresql+psycopg://u@h/db"
    assert normalize_database_url("sqlite:///x.db") == "sqlite:///x.db"

    db = Database("postgres://u:p@db.example.com/app")
    try:
        assert db.url.drivername == "postgresql+psycopg"
        assert db.engine.dialect.name == "postgresql"
    finally:
        db.dispose()


def test_missing_url_is_a_startup_error():
    with pytest.raises(RuntimeError, match="POSTGRES_URL"):
        Database("")


def test_create_tables_script(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'schema.db'}")
    try:
        create_all(db)
        assert {"users", "invoices"} <= set(inspect(db.engine).get_table_names())
    finally:
        db.dispose()


def test_configure_logging_is_idempotent():
    logger = configure_logging("debug")
    configure_logging("warning")

    assert logger.name == "invoicing"
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
