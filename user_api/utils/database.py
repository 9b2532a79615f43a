"""SQLAlchemy engine construction and connectivity checks."""

from __future__ import annotations

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url

from user_api.config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(config: Settings | None = None) -> Engine:
    """Create the pooled engine shared by every request."""
    config = config or settings
    url = make_url(config.database_url)
    options: dict = {"echo": config.sql_echo, "future": True}

    # SQLite uses a single-file/in-memory pool without sizing knobs.
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_pre_ping=True,
            pool_size=max(1, config.db_pool_size),
            max_overflow=max(0, config.db_max_overflow),
            pool_timeout=max(1, config.db_pool_timeout_seconds),
        )

    engine = create_engine(url, **options)
    logger.info("Database engine created for %s", url.render_as_string(hide_password=True))
    return engine


def verify_connection(engine: Engine) -> None:
    """Run a trivial query so an unreachable store fails fast at startup."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
