"""Invoice create/update/delete actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable, Mapping

from sqlalchemy.exc import SQLAlchemyError

from invoicing.core.config import Settings, get_settings
from invoicing.core.revalidation import RevalidationRegistry
from invoicing.repositories.sql_repository import InvoiceNotFoundError, SQLRepository
from invoicing.services.forms import InvoiceForm, parse_form
from invoicing.services.results import ActionError, ActionResult, ActionSuccess

logger = logging.getLogger(__name__)


def _today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass
class InvoiceService:
    repository: SQLRepository
    revalidation: RevalidationRegistry
    settings: Settings = field(default_factory=get_settings)
    today: Callable[[], date] = _today

    def _done(self, message: str, *, redirect: bool = True) -> ActionSuccess:
        path = self.settings.invoices_path
        self.revalidation.revalidate(path)
        return ActionSuccess(message, redirect_to=path if redirect else None)

    def create_invoice(self, form_data: Mapping[str, Any]) -> ActionResult:
        form, errors = parse_form(InvoiceForm, form_data)
        if form is None:
            return ActionError("Missing Fields. Failed to Create Invoice.", errors)

        try:
            invoice = self.repository.create_invoice(
                form.customer_id,
                form.amount_in_cents,
                form.status,
                self.today(),
            )
        except SQLAlchemyError:
            logger.exception("Failed to create invoice")
            return ActionError("Database Error: Failed to Create Invoice.", kind="database")

        logger.info("Created invoice %s", invoice.id)
        return self._done("Created Invoice.")

    def update_invoice(self, invoice_id: str, form_data: Mapping[str, Any]) -> ActionResult:
        form, errors = parse_form(InvoiceForm, form_data)
        if form is None:
            return ActionError("Missing Fields. Failed to Update Invoice.", errors)

        try:
            self.repository.update_invoice(
                invoice_id,
                customer_id=form.customer_id,
                amount=form.amount_in_cents,
                status=form.status,
            )
        except InvoiceNotFoundError:
            return ActionError("Invoice not found.", kind="not_found")
        except SQLAlchemyError:
            logger.exception("Failed to update invoice %s", invoice_id)
            return ActionError("Database Error: Failed to Update Invoice.", kind="database")

        logger.info("Updated invoice %s", invoice_id)
        return self._done("Updated Invoice.")

    def delete_invoice(self, invoice_id: str) -> ActionResult:
        try:
            self.repository.delete_invoice(invoice_id)
        except InvoiceNotFoundError:
            return ActionError("Invoice not found.", kind="not_found")
        except SQLAlchemyError:
            logger.exception("Failed to delete invoice %s", invoice_id)
            return ActionError("Database Error: Failed to Delete Invoice.", kind="database")

        logger.info("Deleted invoice %s", invoice_id)
        return self._done("Deleted Invoice.", redirect=False)
