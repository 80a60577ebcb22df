"""Database engine utilities for badge store connectivity.

This module centralizes engine construction so every SQLAlchemy usage stays
behind the db-layer boundary.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool


def db_create_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for badge store access.

    In-memory SQLite URLs share one connection so every request sees the same
    database; other SQLite URLs allow use from the server worker threads.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    normalized_url = database_url.strip()
    if not normalized_url:
        raise ValueError("database_url must not be blank")

    parsed_url = make_url(normalized_url)
    if parsed_url.get_backend_name() != "sqlite":
        return create_engine(normalized_url, pool_pre_ping=True)

    if parsed_url.database in (None, "", ":memory:"):
        return create_engine(
            normalized_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(normalized_url, connect_args={"check_same_thread": False})
