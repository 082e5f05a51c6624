from __future__ import annotations

from invoicing.core.revalidation import RevalidationRegistry


def test_revalidate_bumps_only_the_given_path():
    registry = RevalidationRegistry()
    before = registry.etag("/dashboard/invoices")

    assert registry.revalidate("/dashboard/invoices/") == 1
    assert registry.revalidate("dashboard/invoices") == 2

    assert registry.version("/dashboard/invoices") == 2
    assert registry.version("/dashboard/customers") == 0
    assert registry.etag("/dashboard/invoices") != before


def test_etags_differ_between_registries():
    assert RevalidationRegistry().etag("/x") != RevalidationRegistry().etag("/x")
