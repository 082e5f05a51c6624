"""
Form schemas shared by the actions.

Each schema reads raw form values (strings or missing keys) and produces
typed data, or a field -> messages map through :func:`parse_form`.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from invoicing.db.models import INVOICE_STATUSES

PASSWORD_MIN_LENGTH = 6
# invoices.amount is a 32-bit integer column
MAX_AMOUNT_CENTS = 2_147_483_647

FormT = TypeVar("FormT", bound=BaseModel)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


class _FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# -------------------------------------- auth --------------------------------------
class CredentialsForm(_FormModel):
    email: str
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> str:
        raw = _text(value).strip()
        try:
            validate_email(raw, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return raw

    @field_validator("password", mode="before")
    @classmethod
    def _password(cls, value: Any) -> str:
        raw = _text(value)
        if len(raw) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters long",
                {"min_length": PASSWORD_MIN_LENGTH},
            )
        return raw


class SignupForm(CredentialsForm):
    """Signup with a display name; the name must be unique like the e-mail."""

    name: str

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> str:
        raw = _text(value).strip()
        if not raw:
            raise PydanticCustomError("name_required", "Name is required")
        return raw


class EmailSignupForm(CredentialsForm):
    """Signup variant where the name is optional."""

    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, value: Any) -> Optional[str]:
        raw = _text(value).strip()
        return raw or None


# -------------------------------------- invoices --------------------------------------
class InvoiceForm(_FormModel):
    customer_id: str = Field(alias="customerId")
    amount: Decimal
    status: Literal["pending", "paid"]

    @field_validator("customer_id", mode="before")
    @classmethod
    def _customer(cls, value: Any) -> str:
        raw = _text(value).strip()
        if not raw:
            raise PydanticCustomError("customer_required", "Please select a customer")
        return raw

    @field_validator("amount", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Decimal:
        not_positive = PydanticCustomError("amount_not_positive", "Please enter an amount greater than $0")
        too_large = PydanticCustomError("amount_too_large", "Please enter a smaller amount")
        try:
            amount = Decimal(_text(value).strip() or "0")
        except InvalidOperation:
            raise not_positive
        # NaN first: ordering comparisons on NaN signal InvalidOperation.
        if amount.is_nan() or amount <= 0:
            raise not_positive
        # Anything from $100,000,000 up cannot fit, and would overflow quantize().
        if amount.is_infinite() or amount.adjusted() >= 8:
            raise too_large
        cents = _to_cents(amount)
        if cents <= 0:
            raise not_positive
        if cents > MAX_AMOUNT_CENTS:
            raise too_large
        return amount

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> str:
        raw = _text(value).strip()
        if raw not in INVOICE_STATUSES:
            raise PydanticCustomError("status_invalid", "Please select an invoice status")
        return raw

    @property
    def amount_in_cents(self) -> int:
        return _to_cents(self.amount)


def _to_cents(amount: Decimal) -> int:
    return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# -------------------------------------- helpers --------------------------------------
_FIELD_NAMES = {"customer_id": "customerId"}


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Flatten a ValidationError into ``{form field: [messages]}``."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("__root__",)
        key = str(loc[0])
        key = _FIELD_NAMES.get(key, key)
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors


def parse_form(schema: Type[FormT], data: Mapping[str, Any]) -> Tuple[Optional[FormT], Dict[str, List[str]]]:
    """
    Validate ``data`` against ``schema``.

    Only the schema's own fields are read; missing keys behave like empty
    values so every field reports its own message.
    """
    values = {}
    for name, info in schema.model_fields.items():
        key = info.alias or name
        values[key] = data.get(key)
    try:
        return schema.model_validate(values), {}
    except ValidationError as exc:
        return None, field_errors(exc)
