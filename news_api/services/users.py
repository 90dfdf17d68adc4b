from __future__ import annotations

from typing import List

import asyncpg

from news_api.core.errors import NotFound


async def list_users(conn: asyncpg.Connection) -> List[dict]:
    rows = await conn.fetch("SELECT username, name, avatar_url FROM users ORDER BY username")
    return [dict(r) for r in rows]


async def get_user(conn: asyncpg.Connection, username: str) -> dict:
    row = await conn.fetchrow(
        "SELECT username, name, avatar_url FROM users WHERE username = $1",
        username,
    )
    if not row:
        raise NotFound()
    return dict(row)
