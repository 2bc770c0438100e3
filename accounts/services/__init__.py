"""
Use cases for the accounts API.

Each service module orchestrates repositories/collaborators to implement
business rules (sign up, sign in, switch project, membership checks).

Routers (FastAPI endpoints) call these services instead of touching the
database or sessions directly; wiring lives in ``accounts.dependencies``.
"""
