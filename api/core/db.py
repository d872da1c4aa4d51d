"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. The app factory opens it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from .config import DatabaseSettings

logger = logging.getLogger(__name__)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, settings: DatabaseSettings) -> None:
        self._settings = settings
        self._pool: asyncpg.Pool | None = None

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self._settings.dsn,
            min_size=self._settings.min_pool_size,
            max_size=self._settings.max_pool_size,
            max_inactive_connection_lifetime=self._settings.max_inactive_connection_lifetime,
            command_timeout=self._settings.command_timeout,
        )
        logger.info(
            "db_pool_opened host=%s database=%s max_size=%s",
            self._settings.host,
            self._settings.name,
            self._settings.max_pool_size,
        )

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    @property
    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self.pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self.pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return its status tag.
        """
        return await self.pool.execute(sql, *args)
