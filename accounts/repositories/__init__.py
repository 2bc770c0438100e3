"""
Persistence adapters.

Services depend on the protocols in ``interfaces``; the SQLAlchemy-backed
implementations live in ``sql_repository``.
"""
