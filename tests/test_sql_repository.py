"""
Smoke tests for the SQL repositories against a temporary SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from accounts.repositories.sql_repository import (
    ProfileRepository,
    UserRepository,
    UserToGroupRepository,
    UserToProjectRepository,
)


def test_profile_and_user_flow(db_env):
    profiles = ProfileRepository()
    users = UserRepository()

    profile = profiles.save(username="alice", email="alice@example.com")
    user = users.save(profile)

    assert user.id
    assert user.profile.username == "alice"
    assert user.current_project_id is None
    assert profiles.find_one(email="alice@example.com").id == profile.id
    assert profiles.find_one(username="alice").id == profile.id
    assert profiles.find_one(username="bob") is None

    loaded = users.find_one(user.id)
    assert loaded.profile.email == "alice@example.com"
    assert users.find_one("missing") is None


def test_profile_unique_constraints(db_env):
    profiles = ProfileRepository()
    profiles.save(username="alice", email="alice@example.com")

    with pytest.raises(IntegrityError):
        profiles.save(username="alice", email="other@example.com")
    with pytest.raises(IntegrityError):
        profiles.save(username="other", email="alice@example.com")


def test_find_by_username_or_email(db_env):
    users = UserRepository()
    profiles = ProfileRepository()
    alice = users.save(profiles.save(username="alice", email="alice@example.com"))
    users.save(profiles.save(username="bob", email="bob@example.com"))

    assert users.find_by_username_or_email("alice").id == alice.id
    assert users.find_by_username_or_email("alice@example.com").id == alice.id
    assert users.find_by_username_or_email("carol") is None


def test_update_and_memberships(db_env, projects, groups):
    users = UserRepository()
    user = users.save(ProfileRepository().save(username="alice", email="alice@example.com"))
    project = projects.save("Demo")
    group = groups.save("Editors")

    user_to_project = UserToProjectRepository()
    user_to_group = UserToGroupRepository()
    assert user_to_project.find_one(user.id, project.id) is None

    user_to_project.add(user.id, project.id)
    user_to_project.add(user.id, project.id)  # idempotent
    user_to_group.add(user.id, group.id)

    assert user_to_project.find_one(user.id, project.id) is not None
    assert user_to_group.find_one(user.id, group.id) is not None
    assert user_to_group.find_one(user.id, project.id) is None

    users.update(user.id, current_project_id=project.id)
    assert users.find_one(user.id).current_project_id == project.id


def test_create_all_reports_account_tables(db_env):
    from accounts.db.create_tables import create_all

    tables = create_all()
    assert {"profiles", "users", "credentials", "sessions", "users_to_projects", "users_to_groups"} <= set(tables)
