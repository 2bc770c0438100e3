"""Session helpers (issue tokens, cookies, validation)."""
from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Response

from accounts.core.config import get_settings
from accounts.db.models import UserSession
from accounts.db.session import get_session

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "session"


@dataclass
class SessionToken:
    token: str
    expires_at: datetime


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    return value.astimezone(timezone.utc) if value.tzinfo else value.replace(tzinfo=timezone.utc)


class SessionService:
    """Opaque access tokens persisted in the ``sessions`` table."""

    def start_session(self, user_id: str) -> SessionToken:
        token = secrets.token_urlsafe(32)
        ttl = get_settings().session_ttl_seconds
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=ttl)

        with get_session() as session:
            session.add(UserSession(token=token, user_id=user_id, expires_at=expires_at))
            session.commit()
        logger.info("Session started for user %s", user_id)
        return SessionToken(token=token, expires_at=expires_at)

    def resolve(self, token: Optional[str]) -> Optional[str]:
        """Return the user id bound to ``token``; expired sessions are removed."""
        if not token:
            return None

        now = datetime.now(timezone.utc)
        with get_session() as session:
            db_session = session.get(UserSession, token)
            if not db_session:
                return None
            if _as_utc(db_session.expires_at) < now:
                session.delete(db_session)
                session.commit()
                return None
            return db_session.user_id

    def end_session(self, token: Optional[str]) -> None:
        if not token:
            return
        with get_session() as session:
            entity = session.get(UserSession, token)
            if entity:
                session.delete(entity)
                session.commit()


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    secure_cookie = settings.app_env == "prod"
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        httponly=True,
        secure=secure_cookie,
        samesite="strict",
        max_age=settings.session_ttl_seconds,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(SESSION_COOKIE_NAME, path="/")
