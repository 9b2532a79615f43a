"""Table definitions for the relational store."""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    func,
)

EMAIL_PATTERN = r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("img_url", String(255), nullable=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), nullable=False),
    CheckConstraint("length(trim(name)) > 0", name="ck_users_name_not_blank"),
    # Regex operators are PostgreSQL-only.
    CheckConstraint(
        f"email ~ '{EMAIL_PATTERN}'",
        name="ck_users_email_format",
    ).ddl_if(dialect="postgresql"),
    CheckConstraint(
        "img_url IS NULL OR img_url ~ '^https?://.*'",
        name="ck_users_img_url_format",
    ).ddl_if(dialect="postgresql"),
    Index("idx_users_created_at", "created_at"),
)
