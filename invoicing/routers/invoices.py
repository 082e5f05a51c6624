"""
Invoice form endpoints and the JSON listing they revalidate.

The listing ETag comes from the in-process RevalidationRegistry, so it is
only reliable with a single worker process.
"""
from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import JSONResponse, Response

from invoicing.core.revalidation import RevalidationRegistry
from invoicing.db.models import Invoice
from invoicing.repositories.sql_repository import SQLRepository
from invoicing.routers.common import app_state, render_result
from invoicing.services.invoice_service import InvoiceService

router = APIRouter(tags=["invoices"])


def _invoice_service(request: Request) -> InvoiceService:
    return app_state(request, "invoice_service")


def _invoice_dict(entity: Invoice) -> dict:
    return {
        "id": entity.id,
        "customer_id": entity.customer_id,
        "amount": int(entity.amount),
        "status": entity.status,
        "date": entity.date.isoformat(),
    }


@router.get("")
def list_invoices(request: Request, limit: int = 50):
    registry: RevalidationRegistry = app_state(request, "revalidation")
    repository: SQLRepository = app_state(request, "repository")
    path = request.app.state.settings.invoices_path
    etag = registry.etag(path)
    headers = {"ETag": etag, "Cache-Control": "no-cache"}
    if request.headers.get("if-none-match") == etag:
        return Response(status_code=304, headers=headers)
    invoices = repository.list_invoices(limit=max(1, min(limit, 500)))
    return JSONResponse({"invoices": [_invoice_dict(inv) for inv in invoices]}, headers=headers)


@router.post("/create")
def create_invoice(request: Request, customerId: str = Form(""), amount: str = Form(""), status: str = Form("")):
    result = _invoice_service(request).create_invoice({"customerId": customerId, "amount": amount, "status": status})
    return render_result(result)


@router.post("/{invoice_id}/edit")
def update_invoice(
    request: Request,
    invoice_id: str,
    customerId: str = Form(""),
    amount: str = Form(""),
    status: str = Form(""),
):
    result = _invoice_service(request).update_invoice(
        invoice_id,
        {"customerId": customerId, "amount": amount, "status": status},
    )
    return render_result(result)


@router.post("/{invoice_id}/delete")
def delete_invoice(request: Request, invoice_id: str):
    result = _invoice_service(request).delete_invoice(invoice_id)
    return render_result(result)
