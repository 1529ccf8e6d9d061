"""
Core utilities shared across the Bookstore API.

This package hosts:
- configuration helpers (env vars, paths, feature flags)
- the error taxonomy and the JSON error envelope
- logging setup

Routers and services depend on these primitives instead of reading
os.environ or building error responses by hand.
"""
