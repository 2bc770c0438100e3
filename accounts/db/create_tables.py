"""
Create the accounts schema (profiles, users, credentials, sessions,
projects, groups and their membership tables) on the configured database.

Run as ``python -m accounts.db.create_tables``.
"""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the tables on Base.metadata


def create_all() -> list[str]:
    """Create missing tables and return the names of all account tables."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


if __name__ == "__main__":
    try:
        tables = create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create account tables: {exc}") from exc
    print(f"Account tables ready: {', '.join(tables)}")
