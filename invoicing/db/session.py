"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from invoicing.core.config import Settings

Base = declarative_base()


def normalize_database_url(url: str) -> str:
    """Map hosted-provider URLs (postgres://...) onto the psycopg 3 driver."""
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg://" + url[len(prefix) :]
    return url


class Database:
    """
    Owns the engine (connection pool) and the session factory.

    Opened once at process start (application lifespan) and disposed at
    shutdown; repositories receive it explicitly.
    """

    def __init__(self, url: str, *, sslmode: str | None = "require", pool_size: int = 5, echo: bool = False) -> None:
        url = (url or "").strip()
        if not url:
            raise RuntimeError("POSTGRES_URL must be configured to use the SQL backend.")
        parsed = make_url(normalize_database_url(url))
        kwargs: dict = {"future": True, "pool_pre_ping": True, "echo": echo}
        if parsed.get_backend_name() == "postgresql":
            # TLS is mandatory for the hosted Postgres instance.
            if sslmode:
                kwargs["connect_args"] = {"sslmode": sslmode}
            kwargs["pool_size"] = max(1, pool_size)
        elif parsed.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
        self.url = parsed
        self.engine: Engine = create_engine(parsed, **kwargs)
        self._sessionmaker = sessionmaker(bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, sslmode=settings.database_sslmode, pool_size=settings.database_pool_size)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session: Session = self._sessionmaker()
        try:
            yield session
        finally:
            session.close()

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()
