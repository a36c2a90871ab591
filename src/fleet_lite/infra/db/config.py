from __future__ import annotations

import os
from dataclasses import dataclass


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True, slots=True)
class PoolSettings:
    """Connection pool sizing, overridable per deployment."""

    pool_size: int = 10
    max_overflow: int = 20
    pool_recycle: int = 3600

    @classmethod
    def from_env(cls) -> PoolSettings:
        return cls(
            pool_size=_int_env("DB_POOL_SIZE", cls.pool_size),
            max_overflow=_int_env("DB_MAX_OVERFLOW", cls.max_overflow),
            pool_recycle=_int_env("DB_POOL_RECYCLE_SECONDS", cls.pool_recycle),
        )
