from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Keep the accounts package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from accounts import dependencies  # noqa: E402
from accounts.core import config as core_config  # noqa: E402
from accounts.core import rate_limiter  # noqa: E402
from accounts.db import create_tables  # noqa: E402
from accounts.db import models  # noqa: E402
from accounts.db import session as db_session  # noqa: E402
from accounts.repositories.sql_repository import (  # noqa: E402
    GroupRepository,
    ProfileRepository,
    ProjectRepository,
    UserRepository,
    UserToGroupRepository,
    UserToProjectRepository,
)
from accounts.services.auth_service import AuthService  # noqa: E402
from accounts.services.credentials_service import CredentialsService  # noqa: E402
from accounts.services.project_service import ProjectService  # noqa: E402
from accounts.services.session_service import SessionService  # noqa: E402
from accounts.services.user_service import UserService  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    dependencies.get_session_service.cache_clear()
    dependencies.get_user_service.cache_clear()
    dependencies.get_auth_service.cache_clear()
    rate_limiter._limiter.reset()


@pytest.fixture()
def db_env(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_tables.create_all()

    yield db_file

    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def user_service(db_env):
    return UserService(
        user_repository=UserRepository(),
        profile_repository=ProfileRepository(),
        user_to_project_repository=UserToProjectRepository(),
        user_to_group_repository=UserToGroupRepository(),
        project_service=ProjectService(project_repository=ProjectRepository()),
    )


@pytest.fixture()
def session_service(db_env):
    return SessionService()


@pytest.fixture()
def auth_service(user_service, session_service):
    return AuthService(
        user_service=user_service,
        credentials_service=CredentialsService(),
        session_service=session_service,
    )


@pytest.fixture()
def projects(db_env):
    return ProjectRepository()


@pytest.fixture()
def groups(db_env):
    return GroupRepository()
