"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import or_, select, update
from sqlalchemy.orm import contains_eager, joinedload

from accounts.db.models import (
    Group,
    Profile,
    Project,
    User,
    UserToGroup,
    UserToProject,
)
from accounts.db.session import get_session


class ProfileRepository:
    """Username/email identity records."""

    def find_one(self, *, email: str | None = None, username: str | None = None) -> Optional[Profile]:
        if email is None and username is None:
            raise ValueError("find_one requires email or username")
        stmt = select(Profile)
        if email is not None:
            stmt = stmt.where(Profile.email == email)
        if username is not None:
            stmt = stmt.where(Profile.username == username)
        with get_session() as session:
            return session.execute(stmt).scalar_one_or_none()

    def save(self, username: str, email: str) -> Profile:
        """Insert a profile; raises IntegrityError when username or email already exist."""
        profile = Profile(username=username, email=email)
        with get_session() as session:
            session.add(profile)
            session.commit()
            session.refresh(profile)
            return profile


class UserRepository:
    """User records, always returned with their profile loaded."""

    def find_one(self, user_id: str) -> Optional[User]:
        with get_session() as session:
            return session.get(User, user_id, options=[joinedload(User.profile)])

    def find_by_username_or_email(self, value: str) -> Optional[User]:
        stmt = (
            select(User)
            .join(User.profile)
            .where(or_(Profile.username == value, Profile.email == value))
            .options(contains_eager(User.profile))
        )
        with get_session() as session:
            return session.execute(stmt).scalars().first()

    def save(self, profile: Profile) -> User:
        user = User(profile_id=profile.id)
        with get_session() as session:
            session.add(user)
            session.commit()
            user_id = user.id
        return self.find_one(user_id)

    def update(self, user_id: str, **fields) -> None:
        with get_session() as session:
            stmt = (
                update(User)
                .where(User.id == user_id)
                .values(**fields, updated_at=datetime.now(timezone.utc))
            )
            session.execute(stmt)
            session.commit()


class _MembershipRepository:
    """User-to-target join records; existence of a row means membership."""

    model = None
    target_column = ""

    def find_one(self, user_id: str, target_id: str):
        key = {"user_id": user_id, self.target_column: target_id}
        with get_session() as session:
            return session.get(self.model, key)

    def add(self, user_id: str, target_id: str) -> None:
        with get_session() as session:
            session.merge(self.model(user_id=user_id, **{self.target_column: target_id}))
            session.commit()


class UserToProjectRepository(_MembershipRepository):
    model = UserToProject
    target_column = "project_id"


class UserToGroupRepository(_MembershipRepository):
    model = UserToGroup
    target_column = "group_id"


class _NamedEntityRepository:
    model = None

    def get(self, entity_id: str):
        with get_session() as session:
            return session.get(self.model, entity_id)

    def save(self, name: str):
        entity = self.model(name=name)
        with get_session() as session:
            session.add(entity)
            session.commit()
            session.refresh(entity)
            return entity


class ProjectRepository(_NamedEntityRepository):
    model = Project


class GroupRepository(_NamedEntityRepository):
    model = Group
