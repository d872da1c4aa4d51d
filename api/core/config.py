"""
Process settings, read once from environment variables.

The resulting `Settings` object is passed explicitly into the app factory and
the database wrapper; nothing below reads the environment after startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    return environ.get(name, default).strip() or default


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg does not understand libpq's sslmode query parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class DatabaseSettings:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = ""
    name: str = "realstate"
    url: str = ""
    min_pool_size: int = 10
    max_pool_size: int = 10
    # Idle timeout in seconds: a connection left unused this long is closed by
    # the pool. asyncpg has no absolute per-connection lifetime.
    max_inactive_connection_lifetime: float = 60.0
    command_timeout: float = 30.0

    @property
    def dsn(self) -> str:
        """
        Connection string for asyncpg. An explicit URL wins over the discrete parts.
        """
        if self.url:
            return _sanitize_database_url(self.url)

        credentials = quote(self.user, safe="")
        if self.password:
            credentials = f"{credentials}:{quote(self.password, safe='')}"
        return f"postgresql://{credentials}@{self.host}:{self.port}/{quote(self.name, safe='')}"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DatabaseSettings:
        env = os.environ if environ is None else environ
        max_pool_size = max(1, _env_int(env, "DB_POOL_MAX", cls.max_pool_size))
        min_pool_size = min(max(0, _env_int(env, "DB_POOL_MIN", max_pool_size)), max_pool_size)
        return cls(
            host=_env_str(env, "DB_HOST", cls.host),
            port=_env_int(env, "DB_PORT", cls.port),
            user=_env_str(env, "DB_USER", cls.user),
            password=env.get("DB_PASSWORD", ""),
            name=_env_str(env, "DB_NAME", cls.name),
            url=env.get("DATABASE_URL", "").strip(),
            min_pool_size=min_pool_size,
            max_pool_size=max_pool_size,
            max_inactive_connection_lifetime=_env_float(
                env, "DB_CONN_MAX_IDLE", cls.max_inactive_connection_lifetime
            ),
            command_timeout=_env_float(env, "DB_COMMAND_TIMEOUT", cls.command_timeout),
        )


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    database: DatabaseSettings = field(default_factory=DatabaseSettings)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return cls(
            host=_env_str(env, "APP_HOST", cls.host),
            port=_env_int(env, "APP_PORT", cls.port),
            log_level=_env_str(env, "LOG_LEVEL", cls.log_level).upper(),
            database=DatabaseSettings.from_env(env),
        )
