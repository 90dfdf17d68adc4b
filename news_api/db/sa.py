from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from news_api.config import DB_DSN


def _to_sqlalchemy_async_dsn(dsn: str | None) -> str:
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    # Ensure SQLAlchemy asyncpg dialect
    if dsn.startswith("postgresql+asyncpg://"):
        return dsn
    if dsn.startswith("postgresql://"):
        return dsn.replace("postgresql://", "postgresql+asyncpg://", 1)
    if dsn.startswith("postgres://"):
        return dsn.replace("postgres://", "postgresql+asyncpg://", 1)
    # Fallback: assume already usable
    return dsn


@asynccontextmanager
async def engine_scope(dsn: str | None = None) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(_to_sqlalchemy_async_dsn(dsn or DB_DSN), pool_pre_ping=True)
    try:
        yield engine
    finally:
        await engine.dispose()
