"""Repository and collaborator contracts consumed by the services."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

from accounts.db.models import Profile, Project, User

if TYPE_CHECKING:
    from accounts.services.session_service import SessionToken


class ProfileStore(Protocol):
    def find_one(self, *, email: str | None = None, username: str | None = None) -> Optional[Profile]: ...

    def save(self, username: str, email: str) -> Profile: ...


class UserStore(Protocol):
    def find_one(self, user_id: str) -> Optional[User]:
        """Return the user with its profile loaded, or None."""
        ...

    def find_by_username_or_email(self, value: str) -> Optional[User]: ...

    def save(self, profile: Profile) -> User: ...

    def update(self, user_id: str, **fields) -> None: ...


class MembershipStore(Protocol):
    def find_one(self, user_id: str, target_id: str) -> Optional[object]: ...

    def add(self, user_id: str, target_id: str) -> None: ...


class ProjectStore(Protocol):
    def get(self, project_id: str) -> Optional[Project]: ...

    def save(self, name: str) -> Project: ...



class ProjectLookup(Protocol):
    def get(self, project_id: str) -> Project:
        """Return the project or raise NotFoundError."""
        ...


class CredentialsStore(Protocol):
    def create(self, user: User, email: str, password: str) -> None: ...

    def find_by_email_and_password(self, email: str, password: str) -> str:
        """Return the owning user id or raise InvalidCredentialsError."""
        ...


class SessionStore(Protocol):
    def start_session(self, user_id: str) -> SessionToken: ...

    def resolve(self, token: Optional[str]) -> Optional[str]: ...

    def end_session(self, token: Optional[str]) -> None: ...
