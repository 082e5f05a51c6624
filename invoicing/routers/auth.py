from __future__ import annotations

from fastapi import APIRouter, Form, Request
from starlette.concurrency import run_in_threadpool

from invoicing.routers.common import app_state, render_result
from invoicing.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


def _auth_service(request: Request) -> AuthService:
    return app_state(request, "auth_service")


@router.post("/signup")
def signup(request: Request, name: str = Form(""), email: str = Form(""), password: str = Form("")):
    result = _auth_service(request).signup({"name": name, "email": email, "password": password})
    return render_result(result)


@router.post("/login")
async def login(request: Request):
    # The identity provider receives the whole submitted form, not only the credentials.
    form = dict(await request.form())
    result = await run_in_threadpool(_auth_service(request).authenticate, form)
    return render_result(result)
