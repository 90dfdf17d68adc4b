# news_api/db/pool.py
from __future__ import annotations

import logging
from typing import AsyncGenerator

import asyncpg
from fastapi import Request

from news_api.config import DB_COMMAND_TIMEOUT, DB_DSN, DB_POOL_MAX_SIZE, DB_POOL_MIN_SIZE


logger = logging.getLogger("news_api.db")


async def create_pool(dsn: str | None = None) -> asyncpg.Pool:
    dsn = dsn or DB_DSN
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    pool = await asyncpg.create_pool(
        dsn=dsn,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        command_timeout=DB_COMMAND_TIMEOUT,
    )
    logger.info(
        "Database pool created",
        extra={"event": "db_pool_created", "min_size": DB_POOL_MIN_SIZE, "max_size": DB_POOL_MAX_SIZE},
    )
    return pool


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return
    await pool.close()
    logger.info("Database pool closed", extra={"event": "db_pool_closed"})


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "pool", None)
    if pool is None:
        raise RuntimeError("Database pool is not initialized. Start the app through its lifespan.")
    return pool


async def get_connection(request: Request) -> AsyncGenerator[asyncpg.Connection, None]:
    """One pooled connection per request, released once the handler is done."""
    pool = get_pool(request)
    async with pool.acquire() as conn:
        yield conn
