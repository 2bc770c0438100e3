"""Process-wide logging setup."""

from __future__ import annotations

import logging

from accounts.core.config import get_settings

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure root logging from settings; later calls are no-ops."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
