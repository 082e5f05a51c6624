from __future__ import annotations

import pytest

from invoicing.services.forms import EmailSignupForm, InvoiceForm, SignupForm, parse_form


def test_invoice_amount_is_converted_to_cents():
    form, errors = parse_form(InvoiceForm, {"customerId": "c1", "amount": "12.50", "status": "pending"})

    assert errors == {}
    assert form.customer_id == "c1"
    assert form.amount_in_cents == 1250
    assert form.status == "pending"


def test_invoice_amount_rounds_half_up_to_the_cent():
    form, _ = parse_form(InvoiceForm, {"customerId": "c1", "amount": "0.125", "status": "paid"})
    assert form.amount_in_cents == 13


@pytest.mark.parametrize("amount", ["0", "-3", "", None, "abc", "0.001", "NaN", "sNaN", "-Infinity", "-1e30"])
def test_invoice_amount_must_be_positive(amount):
    form, errors = parse_form(InvoiceForm, {"customerId": "c1", "amount": amount, "status": "paid"})

    assert form is None
    assert errors == {"amount": ["Please enter an amount greater than $0"]}


@pytest.mark.parametrize("amount", ["21474836.48", "99999999999", "1e30", "9" * 40, "Infinity"])
def test_invoice_amount_must_fit_the_column(amount):
    form, errors = parse_form(InvoiceForm, {"customerId": "c1", "amount": amount, "status": "paid"})

    assert form is None
    assert errors == {"amount": ["Please enter a smaller amount"]}


def test_invoice_status_outside_enum_is_rejected():
    form, errors = parse_form(InvoiceForm, {"customerId": "c1", "amount": "5", "status": "overdue"})

    assert form is None
    assert errors == {"status": ["Please select an invoice status"]}


def test_missing_invoice_fields_report_every_field():
    form, errors = parse_form(InvoiceForm, {})

    assert form is None
    assert errors == {
        "customerId": ["Please select a customer"],
        "amount": ["Please enter an amount greater than $0"],
        "status": ["Please select an invoice status"],
    }


def test_misspelled_customer_key_is_not_accepted():
    _, errors = parse_form(InvoiceForm, {"custmerId": "c1", "amount": "5", "status": "paid"})
    assert errors == {"customerId": ["Please select a customer"]}


def test_signup_form_field_errors():
    form, errors = parse_form(SignupForm, {"name": "  ", "email": "not-an-email", "password": "12345"})

    assert form is None
    assert errors == {
        "name": ["Name is required"],
        "email": ["Invalid email address"],
        "password": ["Password must be at least 6 characters long"],
    }


def test_email_signup_form_treats_blank_name_as_absent():
    form, errors = parse_form(EmailSignupForm, {"name": " ", "email": " a@b.com ", "password": "secret"})

    assert errors == {}
    assert form.name is None
    assert form.email == "a@b.com"
    assert form.password == "secret"


def test_largest_amount_the_column_holds_is_accepted():
    form, errors = parse_form(InvoiceForm, {"customerId": "c1", "amount": "21474836.47", "status": "paid"})

    assert errors == {}
    assert form.amount_in_cents == 2_147_483_647
