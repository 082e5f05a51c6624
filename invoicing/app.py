from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from invoicing.core.config import Settings, get_settings
from invoicing.core.logging import configure_logging
from invoicing.core.revalidation import RevalidationRegistry
from invoicing.db.session import Database
from invoicing.repositories.sql_repository import SQLRepository
from invoicing.routers import auth as auth_router
from invoicing.routers import invoices as invoices_router
from invoicing.services.auth_service import AuthService
from invoicing.services.identity import IdentityProvider
from invoicing.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
    identity_provider: IdentityProvider | None = None,
) -> FastAPI:
    """
    Factory compatible with uvicorn/gunicorn (``--factory``).

    The database handle is opened here unless one is injected, and disposed
    when the application shuts down.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database.from_settings(settings)
        repository = SQLRepository(db)
        revalidation = RevalidationRegistry()
        app.state.database = db
        app.state.repository = repository
        app.state.revalidation = revalidation
        app.state.auth_service = AuthService(repository, identity_provider=identity_provider, settings=settings)
        app.state.invoice_service = InvoiceService(repository, revalidation, settings=settings)
        logger.info("Database pool opened (%s)", db.url.get_backend_name())
        try:
            yield
        finally:
            if database is None:
                db.dispose()
                logger.info("Database pool closed")

    app = FastAPI(title="Invoicing Dashboard Actions", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(auth_router.router)
    app.include_router(invoices_router.router, prefix=settings.invoices_path)
    return app
