"""
Configuration helpers for the invoicing backend.

Routers and services read a Settings instance instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    database_sslmode: str
    database_pool_size: int
    log_level: str
    signup_requires_name: bool
    login_path: str
    after_login_path: str
    invoices_path: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _path(value: str | None, default: str) -> str:
        path = (value or default).strip() or default
        if not path.startswith("/"):
            path = "/" + path
        return path.rstrip("/") or "/"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("POSTGRES_URL") or os.getenv("DATABASE_URL") or "").strip(),
        database_sslmode=(os.getenv("DATABASE_SSLMODE") or "require").strip().lower(),
        database_pool_size=_int(os.getenv("DATABASE_POOL_SIZE", "5"), 5),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        signup_requires_name=_bool(os.getenv("SIGNUP_REQUIRES_NAME"), True),
        login_path=_path(os.getenv("LOGIN_PATH"), "/login"),
        after_login_path=_path(os.getenv("AFTER_LOGIN_PATH"), "/dashboard"),
        invoices_path=_path(os.getenv("INVOICES_PATH"), "/dashboard/invoices"),
    )
