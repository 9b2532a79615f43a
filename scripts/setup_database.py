"""Create the users table and optionally seed sample rows."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy import select
from sqlalchemy.engine import Engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_api.config import Settings, settings  # noqa: E402
from user_api.db.tables import metadata, users  # noqa: E402
from user_api.utils.database import build_engine  # noqa: E402

logger = logging.getLogger("setup_database")

SAMPLE_USERS = [
    {"name": "John Doe", "email": "john.doe@example.com", "img_url": "https://example.com/avatars/john.jpg"},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "img_url": "https://example.com/avatars/jane.jpg"},
    {"name": "Bob Wilson", "email": "bob.wilson@example.com", "img_url": None},
    {"name": "Alice Johnson", "email": "alice.johnson@example.com", "img_url": "https://example.com/avatars/alice.jpg"},
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Create the users table.")
    parser.add_argument(
        "--database-url",
        type=str,
        default=None,
        help="SQLAlchemy URL (default: DATABASE_URL from the environment).",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert sample users, skipping emails that already exist.",
    )
    return parser.parse_args(argv)


def create_schema(engine: Engine) -> None:
    """Create missing tables and indexes."""
    metadata.create_all(engine, checkfirst=True)


def seed_users(engine: Engine) -> int:
    """Insert sample users whose email is not stored yet; return the count."""
    emails = [row["email"] for row in SAMPLE_USERS]
    with engine.begin() as connection:
        existing = set(
            connection.execute(select(users.c.email).where(users.c.email.in_(emails))).scalars()
        )
        missing = [row for row in SAMPLE_USERS if row["email"] not in existing]
        if missing:
            connection.execute(users.insert(), missing)
    return len(missing)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    args = parse_args(argv)
    config = settings
    if args.database_url:
        config = Settings(database_url=args.database_url)

    engine = build_engine(config)
    try:
        create_schema(engine)
        logger.info("Users table ready")
        if args.seed:
            inserted = seed_users(engine)
            logger.info("Inserted %d sample user(s)", inserted)
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
