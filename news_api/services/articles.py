"""Article reads and vote mutation (raw SQL over an explicitly passed connection)."""

from __future__ import annotations

import logging
from typing import List, Tuple

import asyncpg

from news_api.config import DEFAULT_ARTICLE_IMG_URL
from news_api.core.errors import NotFound
from news_api.db.queries import ARTICLE_SUMMARY_COLUMNS, ArticleListQuery
from news_api.models.schemas import NewArticle
from news_api.services.topics import topic_exists


logger = logging.getLogger("news_api.articles")


async def get_article(conn: asyncpg.Connection, article_id: int) -> dict:
    sql = f"""
    SELECT {ARTICLE_SUMMARY_COLUMNS},
      articles.body
    FROM articles
    LEFT JOIN comments ON comments.article_id = articles.article_id
    WHERE articles.article_id = $1
    GROUP BY articles.article_id
    """
    row = await conn.fetchrow(sql, article_id)
    if not row:
        raise NotFound()
    return dict(row)


async def article_exists(conn: asyncpg.Connection, article_id: int) -> bool:
    row = await conn.fetchrow("SELECT 1 AS ok FROM articles WHERE article_id = $1", article_id)
    return row is not None


async def list_articles(conn: asyncpg.Connection, query: ArticleListQuery) -> Tuple[List[dict], int]:
    """
    Return one page of articles plus the size of the whole filtered set.

    An unknown topic is NotFound; a known topic without articles is an empty page.
    """
    if query.topic is not None and not await topic_exists(conn, query.topic):
        raise NotFound()

    select_sql, select_args = query.select_sql()
    count_sql, count_args = query.count_sql()
    rows = await conn.fetch(select_sql, *select_args)
    total = await conn.fetchrow(count_sql, *count_args)
    return [dict(r) for r in rows], int(total["total_count"]) if total else 0


async def create_article(conn: asyncpg.Connection, payload: NewArticle) -> dict:
    sql = """
    INSERT INTO articles (author, title, body, topic, article_img_url)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING article_id, author, title, body, topic, created_at, votes, article_img_url
    """
    row = await conn.fetchrow(
        sql,
        payload.author,
        payload.title,
        payload.body,
        payload.topic,
        payload.article_img_url or DEFAULT_ARTICLE_IMG_URL,
    )
    article = dict(row)
    article["comment_count"] = 0
    logger.info(
        "Article created",
        extra={"event": "article_created", "article_id": article["article_id"], "author": payload.author},
    )
    return article


async def update_article_votes(conn: asyncpg.Connection, article_id: int, inc_votes: int) -> dict:
    sql = """
    UPDATE articles
    SET votes = votes + $1
    WHERE article_id = $2
    RETURNING article_id, author, title, body, topic, created_at, votes, article_img_url,
      (SELECT COUNT(*)::int FROM comments WHERE comments.article_id = articles.article_id) AS comment_count
    """
    row = await conn.fetchrow(sql, inc_votes, article_id)
    if not row:
        raise NotFound()
    logger.info(
        "Article votes changed",
        extra={"event": "article_votes_changed", "article_id": article_id, "inc_votes": inc_votes},
    )
    return dict(row)
