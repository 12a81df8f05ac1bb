"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Inside `async with transaction():` every helper below runs on the
transaction's connection instead of the pool, so repository code does not
need to know whether it is part of a larger unit of work.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings
from .results import MutationResult

_pool: asyncpg.Pool | None = None
_tx_conn: ContextVar[asyncpg.Connection | None] = ContextVar("tx_conn", default=None)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _executor() -> asyncpg.Pool | asyncpg.Connection:
    conn = _tx_conn.get()
    return conn if conn is not None else pool()


@asynccontextmanager
async def transaction() -> AsyncIterator[asyncpg.Connection]:
    """
    Run the enclosed helpers on one connection inside a transaction.

    Nested use joins the outer transaction.
    """
    current = _tx_conn.get()
    if current is not None:
        yield current
        return

    async with pool().acquire() as conn:
        async with conn.transaction():
            token = _tx_conn.set(conn)
            try:
                yield conn
            finally:
                _tx_conn.reset(token)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def rows_affected(status: str | None) -> int:
    """
    Parse an asyncpg command tag ("DELETE 3", "INSERT 0 1", "UPDATE 0").

    Returns -1 when the tag carries no row count.
    """
    parts = (status or "").split()
    if len(parts) < 2 or not parts[-1].isdigit():
        return -1
    return int(parts[-1])


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await _executor().fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await _executor().fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> MutationResult:
    """
    Run a statement (INSERT/UPDATE/DELETE) and report how many rows it touched.
    """
    status = await _executor().execute(sql, *args)
    return MutationResult(rows_affected=rows_affected(status))
