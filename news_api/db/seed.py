"""
Development database bootstrap: recreate the tables and load the bundled data set.

Used by `cli.py seed`; the API itself never creates or alters tables.
"""

from __future__ import annotations

import logging

from sqlalchemy import insert

from news_api.db import dev_data
from news_api.db.base import articles, comments, metadata, topics, users
from news_api.db.sa import engine_scope


logger = logging.getLogger("news_api.seed")


async def seed(dsn: str | None = None, data=dev_data) -> dict:
    async with engine_scope(dsn) as engine:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
            await conn.execute(insert(topics), data.TOPICS)
            await conn.execute(insert(users), data.USERS)
            # explicit ids keep comment references stable; sequences are resynced below
            await conn.execute(insert(articles), data.ARTICLES)
            await conn.execute(insert(comments), data.COMMENTS)
            for table, key in ((articles, "article_id"), (comments, "comment_id")):
                await conn.exec_driver_sql(
                    f"SELECT setval(pg_get_serial_sequence('{table.name}', '{key}'), "
                    f"(SELECT COALESCE(MAX({key}), 1) FROM {table.name}))"
                )

    counts = {
        "topics": len(data.TOPICS),
        "users": len(data.USERS),
        "articles": len(data.ARTICLES),
        "comments": len(data.COMMENTS),
    }
    logger.info("Database seeded", extra={"event": "db_seeded", **counts})
    return counts
