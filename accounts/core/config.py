"""
Configuration helpers for the accounts backend.

Settings are read once from environment variables so that routers/services do
not fetch os.environ directly. Tests call ``get_settings.cache_clear()`` after
changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    session_ttl_seconds: int
    password_min_length: int
    auth_rate_limit: int
    auth_rate_window_seconds: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        session_ttl_seconds=max(60, _int(os.getenv("SESSION_TTL_SECONDS", "86400"), 86400)),
        password_min_length=_int(os.getenv("PASSWORD_MIN_LENGTH", "8"), 8),
        auth_rate_limit=_int(os.getenv("AUTH_RATE_LIMIT", "20"), 20),
        auth_rate_window_seconds=_int(os.getenv("AUTH_RATE_WINDOW_SECONDS", "60"), 60),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
