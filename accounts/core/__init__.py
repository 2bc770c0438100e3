"""
Core utilities shared across the accounts service.

This package hosts:
- configuration helpers (env vars, TTLs, rate limits)
- the error taxonomy raised by services
- cross-cutting helpers such as logging, password hashing and rate limiting.

Services and routers depend on these primitives instead of reading
os.environ or hashing passwords themselves.
"""
