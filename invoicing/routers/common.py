"""Helpers shared by the routers (service lookup, result rendering)."""
from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse, RedirectResponse, Response

from invoicing.services.results import ActionResult

ERROR_STATUS = {
    "validation": 400,
    "duplicate": 409,
    "auth": 401,
    "not_found": 404,
    "database": 500,
}


def app_state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured on app.state")
    return value


def render_result(result: ActionResult) -> Response:
    """Redirect (303) on success with a target, JSON form state otherwise."""
    if result.ok:
        if result.redirect_to:
            return RedirectResponse(result.redirect_to, status_code=303)
        return JSONResponse(result.to_state())
    return JSONResponse(result.to_state(), status_code=ERROR_STATUS.get(result.kind, 400))
