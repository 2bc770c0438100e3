"""
User and membership use cases.

Account creation checks email then username uniqueness before inserting the
profile and the user. The ``profiles`` table also carries UNIQUE constraints;
a concurrent insert that slips past the checks is reported with the same
tagged errors.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import IntegrityError

from accounts.core.errors import (
    EmailTakenError,
    NoProjectSelectedError,
    NotFoundError,
    NotMemberError,
    UsernameTakenError,
)
from accounts.db.models import Project, User
from accounts.repositories.interfaces import MembershipStore, ProfileStore, ProjectLookup, UserStore

logger = logging.getLogger(__name__)


@dataclass
class UserService:
    user_repository: UserStore
    profile_repository: ProfileStore
    user_to_project_repository: MembershipStore
    user_to_group_repository: MembershipStore
    project_service: ProjectLookup

    def create(self, email: str, username: str) -> User:
        self._check_email_not_taken(email)
        self._check_username_not_taken(username)
        try:
            profile = self.profile_repository.save(username=username, email=email)
        except IntegrityError:
            # Lost a race against another sign-up; report which field collided.
            self._check_email_not_taken(email)
            self._check_username_not_taken(username)
            raise
        user = self.user_repository.save(profile)
        logger.info("User %s created for profile %s", user.id, username)
        return user

    def get(self, user_id: str) -> User:
        user = self.user_repository.find_one(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def get_current_project_or_fail(self, user_id: str) -> Project:
        user = self.get(user_id)
        if not user.current_project_id:
            raise NoProjectSelectedError()
        return self.project_service.get(user.current_project_id)

    def get_by_username_or_email(self, username_or_email: str) -> Optional[User]:
        return self.user_repository.find_by_username_or_email(username_or_email)

    def is_member_of_project(self, project_id: str, user_id: str) -> bool:
        return self.user_to_project_repository.find_one(user_id, project_id) is not None

    def is_member_of_group(self, group_id: str, user_id: str) -> bool:
        return self.user_to_group_repository.find_one(user_id, group_id) is not None

    def switch_project(self, project_id: str, user_id: str) -> None:
        if not self.is_member_of_project(project_id, user_id):
            logger.warning("User %s tried to switch to foreign project %s", user_id, project_id)
            raise NotMemberError()
        self.user_repository.update(user_id, current_project_id=project_id)
        logger.info("User %s switched to project %s", user_id, project_id)

    def _check_email_not_taken(self, email: str) -> None:
        if self.profile_repository.find_one(email=email):
            raise EmailTakenError()

    def _check_username_not_taken(self, username: str) -> None:
        if self.profile_repository.find_one(username=username):
            raise UsernameTakenError()
