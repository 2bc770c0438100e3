from __future__ import annotations

import pytest

from accounts.core.errors import (
    EmailTakenError,
    ErrorCode,
    NoProjectSelectedError,
    NotFoundError,
    NotMemberError,
    UsernameTakenError,
)
from accounts.repositories.sql_repository import (
    ProfileRepository,
    UserRepository,
    UserToGroupRepository,
    UserToProjectRepository,
)


class _BlindProfileRepository(ProfileRepository):
    """Misses existing rows on lookups, like a concurrent sign-up that checked first."""

    def __init__(self, blind_lookups: int):
        self.blind_lookups = blind_lookups

    def find_one(self, **kwargs):
        if self.blind_lookups > 0:
            self.blind_lookups -= 1
            return None
        return super().find_one(**kwargs)


def test_create_rejects_taken_email_and_username(user_service):
    user_service.create(email="a@x.com", username="alice")

    with pytest.raises(EmailTakenError) as exc:
        user_service.create(email="a@x.com", username="someone-else")
    assert exc.value.code is ErrorCode.EMAIL_TAKEN

    with pytest.raises(UsernameTakenError) as exc:
        user_service.create(email="b@x.com", username="alice")
    assert exc.value.code is ErrorCode.USERNAME_TAKEN

    assert ProfileRepository().find_one(email="b@x.com") is None


def test_email_is_checked_before_username(user_service):
    user_service.create(email="a@x.com", username="alice")

    with pytest.raises(EmailTakenError):
        user_service.create(email="a@x.com", username="alice")


def test_create_reports_race_on_unique_constraint(user_service):
    user_service.create(email="a@x.com", username="alice")
    user_service.profile_repository = _BlindProfileRepository(blind_lookups=2)

    with pytest.raises(EmailTakenError):
        user_service.create(email="a@x.com", username="alice2")

    user_service.profile_repository = _BlindProfileRepository(blind_lookups=2)
    with pytest.raises(UsernameTakenError):
        user_service.create(email="b@x.com", username="alice")


def test_get_loads_profile_and_fails_when_missing(user_service):
    created = user_service.create(email="a@x.com", username="alice")

    user = user_service.get(created.id)
    assert user.profile.username == "alice"
    assert user.profile.email == "a@x.com"

    with pytest.raises(NotFoundError) as exc:
        user_service.get("no-such-user")
    assert exc.value.code is ErrorCode.NOT_FOUND


def test_get_by_username_or_email_matches_either_field(user_service):
    created = user_service.create(email="a@x.com", username="alice")
    user_service.create(email="b@x.com", username="bob")

    by_name = user_service.get_by_username_or_email("alice")
    by_email = user_service.get_by_username_or_email("a@x.com")

    assert by_name.id == by_email.id == created.id
    assert user_service.get_by_username_or_email("nobody") is None


def test_current_project_requires_selection(user_service, projects):
    user = user_service.create(email="a@x.com", username="alice")
    project = projects.save("Demo")

    with pytest.raises(NoProjectSelectedError) as exc:
        user_service.get_current_project_or_fail(user.id)
    assert exc.value.code is ErrorCode.NO_PROJECT_SELECTED

    UserToProjectRepository().add(user.id, project.id)
    user_service.switch_project(project.id, user.id)

    current = user_service.get_current_project_or_fail(user.id)
    assert current.id == project.id
    assert current.name == "Demo"


def test_switch_project_rejects_non_members(user_service, projects):
    user = user_service.create(email="a@x.com", username="alice")
    mine = projects.save("Mine")
    foreign = projects.save("Foreign")
    UserToProjectRepository().add(user.id, mine.id)
    user_service.switch_project(mine.id, user.id)

    with pytest.raises(NotMemberError) as exc:
        user_service.switch_project(foreign.id, user.id)
    assert exc.value.code is ErrorCode.NOT_MEMBER

    assert user_service.get(user.id).current_project_id == mine.id


def test_membership_checks_return_booleans(user_service, projects, groups):
    user = user_service.create(email="a@x.com", username="alice")
    project = projects.save("Demo")
    group = groups.save("Editors")

    assert user_service.is_member_of_project(project.id, user.id) is False
    assert user_service.is_member_of_group(group.id, user.id) is False

    UserToProjectRepository().add(user.id, project.id)
    UserToGroupRepository().add(user.id, group.id)

    assert user_service.is_member_of_project(project.id, user.id) is True
    assert user_service.is_member_of_group(group.id, user.id) is True
    assert user_service.is_member_of_project(project.id, "someone-else") is False


def test_get_current_project_or_fail_propagates_not_found(user_service):
    with pytest.raises(NotFoundError) as exc:
        user_service.get_current_project_or_fail("ghost")
    assert exc.value.code is ErrorCode.NOT_FOUND
    assert exc.value.entity == "User"

    user = user_service.create(email="a@x.com", username="alice")
    UserRepository().update(user.id, current_project_id="deleted-project")

    with pytest.raises(NotFoundError) as exc:
        user_service.get_current_project_or_fail(user.id)
    assert exc.value.code is ErrorCode.NOT_FOUND
    assert exc.value.entity == "Project"
    assert exc.value.key == "deleted-project"


def test_project_service_get_fails_for_missing_project(user_service, projects):
    project = projects.save("Demo")

    assert user_service.project_service.get(project.id).name == "Demo"
    with pytest.raises(NotFoundError):
        user_service.project_service.get("nope")
