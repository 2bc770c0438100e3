"""
Sign-up, sign-in and sign-out use cases.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from accounts.core.errors import InvalidCredentialsError
from accounts.repositories.interfaces import CredentialsStore, SessionStore
from accounts.services.user_service import UserService

logger = logging.getLogger(__name__)


@dataclass
class Credentials:
    email: str
    password: str


@dataclass
class SignUpResult:
    email: str


@dataclass
class SignInResult:
    access_token: str


@dataclass
class AuthService:
    """Composes the user, credentials and session collaborators."""

    user_service: UserService
    credentials_service: CredentialsStore
    session_service: SessionStore

    def sign_up(self, credentials: Credentials, username: str) -> SignUpResult:
        email, password = credentials.email, credentials.password
        user = self.user_service.create(email=email, username=username)
        self.credentials_service.create(user, email, password)
        logger.info("Signed up %s", email)
        return SignUpResult(email=email)

    def sign_in(self, credentials: Credentials) -> SignInResult:
        try:
            user_id = self.credentials_service.find_by_email_and_password(credentials.email, credentials.password)
        except InvalidCredentialsError:
            logger.warning("Rejected sign-in for %s", credentials.email)
            raise
        session = self.session_service.start_session(user_id)
        return SignInResult(access_token=session.token)

    def sign_out(self, access_token: Optional[str]) -> None:
        self.session_service.end_session(access_token)
