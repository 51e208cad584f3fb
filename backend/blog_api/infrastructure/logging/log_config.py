"""Centralized logging configuration.

Applies per-category log levels from Settings so that noisy loggers
(e.g. SQLAlchemy SQL statements) can be silenced without affecting other
parts of the application.  When ``log_dir`` is set, everything at INFO and
above also goes to a daily-rotated ``app.log`` and errors to ``error.log``.

Usage:
    from blog_api.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in the FastAPI lifespan)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from blog_api.config import Settings, get_settings


# ── Logger-name → Settings-field mapping ────────────────────────────

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_access": [
        "blog_api.access",
    ],
    "log_level_auth": [
        "blog_api.application.pipeline.authentication",
        "blog_api.application.services.auth_service",
        "blog_api.infrastructure.security",
    ],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"
_FILE_HANDLER_NAMES = ("blog_api.app_file", "blog_api.error_file")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels and handlers from application settings.

    Safe to call more than once; file handlers are not duplicated.
    """
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # Ensure at least one handler exists (uvicorn usually adds one,
    # but when running tests or scripts it may not).
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    if settings.log_dir:
        _add_file_handlers(root, Path(settings.log_dir))

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured — env=%s root=%s, sql=%s, uvicorn=%s, access=%s, auth=%s, dir=%s",
        settings.app_env,
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_uvicorn,
        settings.log_level_access,
        settings.log_level_auth,
        settings.log_dir or "-",
    )


def _add_file_handlers(root: logging.Logger, log_dir: Path) -> None:
    existing = {h.get_name() for h in root.handlers}
    if all(name in existing for name in _FILE_HANDLER_NAMES):
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(_FORMAT)
    targets = (
        (_FILE_HANDLER_NAMES[0], log_dir / "app.log", logging.INFO, 14),
        (_FILE_HANDLER_NAMES[1], log_dir / "error.log", logging.ERROR, 30),
    )
    for name, path, level, keep_days in targets:
        if name in existing:
            continue
        handler = TimedRotatingFileHandler(
            path, when="midnight", backupCount=keep_days, encoding="utf-8"
        )
        handler.set_name(name)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
