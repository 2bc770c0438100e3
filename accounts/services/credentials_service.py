"""Password credentials keyed by user and email."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update

from accounts.core.errors import InvalidCredentialsError
from accounts.core.security import hash_password, needs_rehash, verify_password
from accounts.db.models import Credential, User
from accounts.db.session import get_session

logger = logging.getLogger(__name__)


class CredentialsService:
    def create(self, user: User, email: str, password: str) -> None:
        entity = Credential(user_id=user.id, email=email, password_hash=hash_password(password))
        with get_session() as session:
            session.add(entity)
            session.commit()

    def find_by_email_and_password(self, email: str, password: str) -> str:
        """Return the id of the user owning these credentials.

        Raises InvalidCredentialsError on an unknown email or a wrong password,
        without telling the two apart.
        """
        with get_session() as session:
            stmt = select(Credential).where(Credential.email == email)
            credential = session.execute(stmt).scalar_one_or_none()
        if not credential or not verify_password(password, credential.password_hash):
            raise InvalidCredentialsError()
        if needs_rehash(credential.password_hash):
            self._update_hash(credential.user_id, hash_password(password))
        return credential.user_id

    def _update_hash(self, user_id: str, password_hash: str) -> None:
        with get_session() as session:
            stmt = (
                update(Credential)
                .where(Credential.user_id == user_id)
                .values(password_hash=password_hash, updated_at=datetime.now(timezone.utc))
            )
            session.execute(stmt)
            session.commit()
        logger.info("Password hash upgraded for user %s", user_id)
