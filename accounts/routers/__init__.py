"""
HTTP routers for the accounts API.

Routers translate requests into service calls; business rules stay in
``accounts.services``.
"""
