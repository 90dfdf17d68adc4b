from __future__ import annotations

import logging
from typing import List

import asyncpg

from news_api.core.errors import NotFound
from news_api.models.schemas import NewComment
from news_api.services.articles import article_exists


logger = logging.getLogger("news_api.comments")

COMMENT_COLUMNS = "comment_id, article_id, author, body, votes, created_at"


async def list_comments(conn: asyncpg.Connection, article_id: int) -> List[dict]:
    if not await article_exists(conn, article_id):
        raise NotFound()
    sql = f"""
    SELECT {COMMENT_COLUMNS}
    FROM comments
    WHERE article_id = $1
    ORDER BY created_at DESC, comment_id DESC
    """
    rows = await conn.fetch(sql, article_id)
    return [dict(r) for r in rows]


async def create_comment(conn: asyncpg.Connection, article_id: int, payload: NewComment) -> dict:
    # unknown article is 404; an unknown username surfaces as a foreign key violation (400)
    if not await article_exists(conn, article_id):
        raise NotFound()
    sql = f"""
    INSERT INTO comments (article_id, author, body)
    VALUES ($1, $2, $3)
    RETURNING {COMMENT_COLUMNS}
    """
    row = await conn.fetchrow(sql, article_id, payload.username, payload.body)
    comment = dict(row)
    logger.info(
        "Comment created",
        extra={"event": "comment_created", "comment_id": comment["comment_id"], "article_id": article_id},
    )
    return comment


async def update_comment_votes(conn: asyncpg.Connection, comment_id: int, inc_votes: int) -> dict:
    sql = f"""
    UPDATE comments
    SET votes = votes + $1
    WHERE comment_id = $2
    RETURNING {COMMENT_COLUMNS}
    """
    row = await conn.fetchrow(sql, inc_votes, comment_id)
    if not row:
        raise NotFound()
    logger.info(
        "Comment votes changed",
        extra={"event": "comment_votes_changed", "comment_id": comment_id, "inc_votes": inc_votes},
    )
    return dict(row)


async def delete_comment(conn: asyncpg.Connection, comment_id: int) -> None:
    row = await conn.fetchrow(
        "DELETE FROM comments WHERE comment_id = $1 RETURNING comment_id",
        comment_id,
    )
    if not row:
        raise NotFound()
    logger.info("Comment deleted", extra={"event": "comment_deleted", "comment_id": comment_id})
