"""
Authentication and identity related use cases.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError

from invoicing.core.config import Settings, get_settings
from invoicing.core.security import hash_password
from invoicing.repositories.sql_repository import DuplicateUserError, SQLRepository
from invoicing.services.forms import EmailSignupForm, SignupForm, parse_form
from invoicing.services.identity import (
    CREDENTIALS_STRATEGY,
    AuthError,
    CredentialsProvider,
    IdentityProvider,
)
from invoicing.services.results import ActionError, ActionResult, ActionSuccess

logger = logging.getLogger(__name__)

AUTH_ERROR_MESSAGES = {
    "CredentialsSignin": "Invalid credentials",
}
AUTH_ERROR_FALLBACK = "Something went wrong"


@dataclass
class AuthService:
    """Handles signup and credential sign-in."""

    repository: SQLRepository
    identity_provider: Optional[IdentityProvider] = None
    settings: Settings = field(default_factory=get_settings)

    def __post_init__(self):
        if self.identity_provider is None:
            self.identity_provider = CredentialsProvider(self.repository)

    # -------------------------------------- signup --------------------------------------
    def signup(self, form_data: Mapping[str, Any], *, require_name: bool | None = None) -> ActionResult:
        if require_name is None:
            require_name = self.settings.signup_requires_name
        schema = SignupForm if require_name else EmailSignupForm
        form, errors = parse_form(schema, form_data)
        if form is None:
            return ActionError("Invalid fields.", errors)

        try:
            user = self.repository.create_user(form.email, hash_password(form.password), name=form.name)
        except DuplicateUserError as exc:
            return ActionError(str(exc), kind="duplicate")
        except SQLAlchemyError:
            logger.exception("Signup Error")
            return ActionError("Database Error: Failed to create user.", kind="database")

        logger.info("Created user %s", user.id)
        return ActionSuccess("User created successfully!", redirect_to=self.settings.login_path)

    # -------------------------------------- sign-in --------------------------------------
    def authenticate(self, form_data: Mapping[str, Any]) -> ActionResult:
        try:
            self.identity_provider.sign_in(CREDENTIALS_STRATEGY, form_data)
        except AuthError as exc:
            return ActionError(AUTH_ERROR_MESSAGES.get(exc.type, AUTH_ERROR_FALLBACK), kind="auth")
        return ActionSuccess(redirect_to=self.settings.after_login_path)
