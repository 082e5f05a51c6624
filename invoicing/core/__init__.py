"""
Core utilities shared across the invoicing backend.

This package hosts:
- configuration helpers (env vars, redirect targets, feature flags)
- cross-cutting concerns such as logging, password hashing and the
  revalidation registry used to invalidate cached listings.

Services and routers depend on these primitives instead of reading
os.environ or touching hashing libraries directly.
"""
