"""Data access for the ``users`` table."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from pydantic import ValidationError
from sqlalchemy import insert, select
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from user_api.config import settings
from user_api.db.tables import users
from user_api.schemas.user import User, UserCreate
from user_api.utils.errors import StorageError

logger = logging.getLogger(__name__)

_COLUMNS = (users.c.id, users.c.name, users.c.email, users.c.img_url)


class UserRepository:
    """Parameterized SQL against the users table.

    Every call checks a connection out of the engine pool and returns it
    when the call finishes, whether or not the statement succeeded.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @contextmanager
    def _statement(self, label: str) -> Iterator[None]:
        """Time a statement and normalize driver errors."""
        started = time.perf_counter()
        try:
            yield
        except SQLAlchemyError as exc:
            reason = str(getattr(exc, "orig", None) or exc)
            logger.error("Users %s failed: %s", label, reason)
            raise StorageError(reason) from exc
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            threshold_ms = settings.slow_query_log_threshold_ms
            if threshold_ms > 0 and elapsed_ms >= threshold_ms:
                logger.warning("Slow users %s query %.1fms", label, elapsed_ms)

    def list(self) -> list[User]:
        """Return every stored user in the store's natural order."""
        with self._statement("list"), self.engine.connect() as connection:
            rows = connection.execute(select(*_COLUMNS)).mappings().all()
        return [self._to_user(row) for row in rows]

    def create(self, candidate: UserCreate) -> int:
        """Insert one user and return the identifier assigned by the store."""
        stmt = insert(users).values(
            name=candidate.name,
            email=candidate.email,
            img_url=candidate.img_url,
        )
        with self._statement("create"), self.engine.begin() as connection:
            result = connection.execute(stmt)
            return int(result.inserted_primary_key[0])

    def get_by_id(self, user_id: int) -> User | None:
        """Return the matching user, or ``None`` when no row has that id."""
        stmt = select(*_COLUMNS).where(users.c.id == user_id)
        with self._statement("get_by_id"), self.engine.connect() as connection:
            row = connection.execute(stmt).mappings().first()
        if row is None:
            return None
        return self._to_user(row)

    @staticmethod
    def _to_user(row: RowMapping) -> User:
        try:
            return User.model_validate(dict(row))
        except ValidationError as exc:
            raise StorageError(f"Failed to decode user row: {exc}") from exc
