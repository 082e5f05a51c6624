"""Server-side form actions for the invoicing dashboard."""
