"""
Identity provider seam used by the sign-in action.

The provider is an external collaborator: the action only calls
``sign_in(strategy, form_data)`` and interprets :class:`AuthError`.
:class:`CredentialsProvider` is the default e-mail/password implementation
backed by the users table.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from invoicing.core.security import hash_password, needs_rehash, verify_password
from invoicing.repositories.sql_repository import SQLRepository
from invoicing.services.forms import CredentialsForm, parse_form

logger = logging.getLogger(__name__)

CREDENTIALS_STRATEGY = "credentials"


class AuthError(Exception):
    """Sign-in failure; ``type`` names the failure kind."""

    def __init__(self, type: str, message: str | None = None):
        super().__init__(message or type)
        self.type = type


class CredentialsSignin(AuthError):
    def __init__(self, message: str | None = None):
        super().__init__("CredentialsSignin", message)


class IdentityProvider(Protocol):
    def sign_in(self, strategy: str, form_data: Mapping[str, Any]) -> Any:
        ...


class CredentialsProvider:
    """E-mail/password sign-in against stored password hashes."""

    def __init__(self, repository: SQLRepository):
        self.repository = repository

    def sign_in(self, strategy: str, form_data: Mapping[str, Any]):
        if strategy != CREDENTIALS_STRATEGY:
            raise AuthError("InvalidProvider", f"Unsupported sign-in strategy: {strategy}")
        return self.authorize(form_data)

    def authorize(self, form_data: Mapping[str, Any]):
        credentials, _ = parse_form(CredentialsForm, form_data)
        if credentials is None:
            raise CredentialsSignin()
        user = self.repository.get_user_by_email(credentials.email)
        if not user or not verify_password(credentials.password, user.password):
            logger.info("Credentials sign-in rejected")
            raise CredentialsSignin()
        if needs_rehash(user.password):
            self.repository.update_user_password(user.id, hash_password(credentials.password))
            logger.info("Upgraded password hash for user %s", user.id)
        return user
