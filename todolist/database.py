"""Database connection pool management."""

import logging
from typing import Any, Dict, List, Protocol

import asyncpg

from todolist.config import DatabaseSettings

logger = logging.getLogger(__name__)

SCHEMA = """\
CREATE TABLE IF NOT EXISTS todos (
    id BIGSERIAL PRIMARY KEY,
    text TEXT NOT NULL DEFAULT '',
    completed BOOLEAN NOT NULL DEFAULT FALSE
);
"""

# Bounds of the BIGSERIAL id column.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class TodoPool(Protocol):
    """The subset of asyncpg.Pool the repository relies on."""

    async def fetch(self, query: str, *args: Any) -> List[Any]: ...

    async def execute(self, query: str, *args: Any) -> str: ...


def connect_kwargs(settings: DatabaseSettings) -> Dict[str, Any]:
    """
    Map settings onto asyncpg connection keyword arguments.

    asyncpg treats an absolute host path as the directory holding the
    server's unix socket, so hostnames and socket paths share the same key.
    Unset values are left out.
    """
    kwargs = {
        "host": settings.host,
        "user": settings.user,
        "password": settings.password,
        "database": settings.database,
    }
    return {key: value for key, value in kwargs.items() if value is not None}


async def create_pool(settings: DatabaseSettings) -> asyncpg.Pool:
    """
    Create the database connection pool.

    No connection is opened until the first query; callers beyond
    pool_size wait for a free connection.
    """
    target = "socket" if settings.is_socket else "host"
    logger.info(
        f"Creating database pool ({target}={settings.host}, database={settings.database}, "
        f"max_size={settings.pool_size})"
    )
    return await asyncpg.create_pool(
        min_size=0,
        max_size=settings.pool_size,
        **connect_kwargs(settings),
    )
