"""
Persistence adapters.

Services depend on these repositories rather than issuing SQL themselves.
"""

from .sql_repository import DuplicateUserError, InvoiceNotFoundError, SQLRepository

__all__ = ["DuplicateUserError", "InvoiceNotFoundError", "SQLRepository"]
