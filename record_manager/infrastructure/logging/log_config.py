"""Centralized logging configuration.

The registry services and the in-memory storage each get their own level
so that routine storage traffic can stay quiet while rejected operations
in the services are still reported.

Usage:
    from record_manager.infrastructure.logging.log_config import setup_logging
    setup_logging()
"""

import logging
import sys

from record_manager.config import Settings, get_settings

_LOG_FORMAT = "%(levelname)-8s %(name)s — %(message)s"

# Package logger → Settings field holding its level.
_LEVEL_FIELDS: dict[str, str] = {
    "record_manager.application.services": "log_level_registry",
    "record_manager.infrastructure.memory": "log_level_storage",
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the configured levels; installs a stderr handler if none exists."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _ensure_handler(root)

    for logger_name, settings_field in _LEVEL_FIELDS.items():
        logging.getLogger(logger_name).setLevel(
            _parse_level(getattr(settings, settings_field))
        )

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s registry=%s storage=%s",
        settings.log_level,
        settings.log_level_registry,
        settings.log_level_storage,
    )


def _ensure_handler(root: logging.Logger) -> None:
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
