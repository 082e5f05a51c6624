"""
High-level use cases for the invoicing dashboard.

Each service validates a submitted form, delegates persistence to the
repository and returns an ActionSuccess/ActionError. Routers decide how to
present the result (redirect or re-rendered form state).
"""
