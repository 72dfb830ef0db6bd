"""
Process configuration.

`Settings.from_env()` is called once on startup (see `api/main.py`); the
resulting value is stored on `app.state.settings` and handed to the DB pool
and the auth helpers. Nothing else should read the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    # asyncpg rejects libpq's `sslmode` parameter.
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str = "dev-change-this-secret"
    jwt_algorithm: str = "HS256"
    token_lifetime_s: int = 3600
    bcrypt_rounds: int = 11
    default_page_limit: int = 10
    max_page_limit: int = 100
    db_pool_min: int = 1
    db_pool_max: int = 5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        url = _env_str("DATABASE_URL")
        if not url:
            raise RuntimeError("DATABASE_URL is not set.")

        return cls(
            database_url=_sanitize_database_url(url),
            # Local default keeps development simple; set JWT_SECRET in production.
            jwt_secret=_env_str("JWT_SECRET", "dev-change-this-secret"),
            jwt_algorithm=_env_str("JWT_ALG", "HS256"),
            token_lifetime_s=_env_int("TOKEN_LIFETIME", 3600),
            bcrypt_rounds=_env_int("BCRYPT_ROUNDS", 11),
            default_page_limit=_env_int("DEFAULT_PAGE_LIMIT", 10),
            max_page_limit=_env_int("MAX_PAGE_LIMIT", 100),
            db_pool_min=_env_int("DB_POOL_MIN", 1),
            db_pool_max=_env_int("DB_POOL_MAX", 5),
            log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        )
