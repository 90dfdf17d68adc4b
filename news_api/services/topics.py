from __future__ import annotations

from typing import List

import asyncpg


async def list_topics(conn: asyncpg.Connection) -> List[dict]:
    rows = await conn.fetch("SELECT slug, description FROM topics ORDER BY slug")
    return [dict(r) for r in rows]


async def topic_exists(conn: asyncpg.Connection, slug: str) -> bool:
    row = await conn.fetchrow("SELECT 1 AS ok FROM topics WHERE slug = $1", slug)
    return row is not None
