"""
Dependency factories for FastAPI routes.

Services are built once with SQL-backed collaborators and shared; tests clear
these caches together with the settings/engine caches.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, Request

from accounts.repositories.sql_repository import (
    ProfileRepository,
    ProjectRepository,
    UserRepository,
    UserToGroupRepository,
    UserToProjectRepository,
)
from accounts.services.auth_service import AuthService
from accounts.services.credentials_service import CredentialsService
from accounts.services.project_service import ProjectService
from accounts.services.session_service import SESSION_COOKIE_NAME, SessionService
from accounts.services.user_service import UserService


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    return SessionService()


@lru_cache(maxsize=1)
def get_user_service() -> UserService:
    return UserService(
        user_repository=UserRepository(),
        profile_repository=ProfileRepository(),
        user_to_project_repository=UserToProjectRepository(),
        user_to_group_repository=UserToGroupRepository(),
        project_service=ProjectService(project_repository=ProjectRepository()),
    )


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    return AuthService(
        user_service=get_user_service(),
        credentials_service=CredentialsService(),
        session_service=get_session_service(),
    )


def get_access_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, falling back to the session cookie."""
    header = request.headers.get("authorization") or ""
    scheme, _, value = header.partition(" ")
    if scheme.lower() == "bearer" and value.strip():
        return value.strip()
    return request.cookies.get(SESSION_COOKIE_NAME)


def get_current_user_id(
    token: Optional[str] = Depends(get_access_token),
    sessions: SessionService = Depends(get_session_service),
) -> str:
    user_id = sessions.resolve(token)
    if not user_id:
        raise HTTPException(401, "Not authenticated")
    return user_id
