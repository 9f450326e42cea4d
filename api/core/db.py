"""
Async database wiring (raw SQL) using asyncpg.

The connection pool is created in the app lifespan (see `api/main.py`),
kept on `app.state.pool` and closed on shutdown. Request handlers never
reach for it directly: they receive one borrowed connection through the
`get_connection` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request

from . import config

logger = logging.getLogger(__name__)

PEOPLE_DDL = """
CREATE TABLE IF NOT EXISTS people (
    id SERIAL PRIMARY KEY,
    first_name VARCHAR NOT NULL,
    last_name VARCHAR NOT NULL,
    age INTEGER NOT NULL,
    profession VARCHAR NOT NULL,
    salary INTEGER NOT NULL
)
"""


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    pool = await asyncpg.create_pool(
        dsn=dsn or database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout(),
    )
    logger.info(
        "Database pool ready (min_size=%s, max_size=%s)",
        config.pool_min_size(),
        config.pool_max_size(),
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()
    logger.info("Database pool closed")


async def init_schema(pool: asyncpg.Pool) -> None:
    """
    Create the people table if it does not exist yet.
    """
    async with pool.acquire() as conn:
        await conn.execute(PEOPLE_DDL)
    logger.info("Schema initialized")


def pool_from_request(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. It is created in the app lifespan.")
    return pool


async def get_connection(request: Request) -> AsyncIterator[asyncpg.Connection]:
    """
    FastAPI dependency: borrow one pooled connection for the request.

    The connection goes back to the pool when the response is done, on error
    paths too.
    """
    async with pool_from_request(request).acquire() as conn:
        yield conn
