"""
Async database access (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every statement goes through `query()`, which never raises for driver
errors. Callers branch on `QueryResult.error` instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import asyncpg

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None

DriverError = (asyncpg.PostgresError, asyncpg.InterfaceError)


@dataclass(frozen=True)
class QueryResult:
    rows: list[dict[str, Any]] = field(default_factory=list)
    row_count: int = 0
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def first(self) -> dict[str, Any] | None:
        return self.rows[0] if self.rows else None

    @property
    def is_integrity_violation(self) -> bool:
        return isinstance(self.error, asyncpg.IntegrityConstraintViolationError)

    @property
    def is_foreign_key_violation(self) -> bool:
        return isinstance(self.error, asyncpg.ForeignKeyViolationError)

    @property
    def is_unique_violation(self) -> bool:
        return isinstance(self.error, asyncpg.UniqueViolationError)


async def init_pool(dsn: str, *, min_size: int = 1, max_size: int = 5) -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=dsn,
        min_size=min_size,
        max_size=max_size,
        command_timeout=30,
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


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _row_count(status: str | None, fallback: int) -> int:
    # Command tags look like "INSERT 0 1", "UPDATE 3", "SELECT 10".
    if not status:
        return fallback
    tail = status.rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else fallback


async def query(sql: str, *args: Any) -> QueryResult:
    """
    Run one statement on its own pooled connection.

    The connection is released on every path. Driver errors are returned as
    `QueryResult.error`; anything else propagates.
    """
    try:
        async with pool().acquire() as conn:  # type: asyncpg.Connection
            stmt = await conn.prepare(sql)
            records = await stmt.fetch(*args)
            status = stmt.get_statusmsg()
    except DriverError as exc:
        logger.warning("query_failed sqlstate=%s error=%s", getattr(exc, "sqlstate", None), exc)
        return QueryResult(error=exc)

    rows = [_record_to_dict(r) for r in records]
    return QueryResult(rows=rows, row_count=_row_count(status, len(rows)))
