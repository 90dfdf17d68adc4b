# news_api/api/articles.py
from fastapi import APIRouter, Depends, Query, status
from typing import Optional

import asyncpg

from news_api.db.pool import get_connection
from news_api.db.queries import ArticleListQuery
from news_api.models.schemas import (
    ArticleEnvelope,
    ArticleList,
    CommentEnvelope,
    CommentList,
    NewArticle,
    NewComment,
    RowId,
    VoteUpdate,
)
from news_api.services import articles as svc
from news_api.services import comments as comments_svc

router = APIRouter(prefix="/api/articles", tags=["articles"])


@router.get("", response_model=ArticleList, summary="List articles (filter, sort, paginate)")
async def api_list_articles(
    sort_by: Optional[str] = Query(None, description="One of the allow-listed article columns"),
    order: Optional[str] = Query(None, description="asc | desc"),
    topic: Optional[str] = Query(None, description="Exact topic slug"),
    limit: Optional[str] = Query(None, description="Page size, positive integer"),
    p: Optional[str] = Query(None, description="Page number, positive integer"),
    conn: asyncpg.Connection = Depends(get_connection),
):
    # raw strings here: validation happens in ArticleListQuery before any SQL runs
    query = ArticleListQuery.from_params(sort_by=sort_by, order=order, topic=topic, limit=limit, page=p)
    rows, total_count = await svc.list_articles(conn, query)
    return {"articles": rows, "total_count": total_count}


@router.post("", response_model=ArticleEnvelope, status_code=status.HTTP_201_CREATED)
async def api_create_article(payload: NewArticle, conn: asyncpg.Connection = Depends(get_connection)):
    article = await svc.create_article(conn, payload)
    return {"article": article}


@router.get("/{article_id}", response_model=ArticleEnvelope, summary="Single article with comment_count")
async def api_get_article(article_id: RowId, conn: asyncpg.Connection = Depends(get_connection)):
    article = await svc.get_article(conn, article_id)
    return {"article": article}


@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def api_update_article_votes(
    article_id: RowId,
    payload: VoteUpdate,
    conn: asyncpg.Connection = Depends(get_connection),
):
    article = await svc.update_article_votes(conn, article_id, payload.inc_votes)
    return {"article": article}


@router.get("/{article_id}/comments", response_model=CommentList)
async def api_list_comments(article_id: RowId, conn: asyncpg.Connection = Depends(get_connection)):
    comments = await comments_svc.list_comments(conn, article_id)
    return {"comments": comments}


@router.post("/{article_id}/comments", response_model=CommentEnvelope, status_code=status.HTTP_201_CREATED)
async def api_create_comment(
    article_id: RowId,
    payload: NewComment,
    conn: asyncpg.Connection = Depends(get_connection),
):
    comment = await comments_svc.create_comment(conn, article_id, payload)
    return {"comment": comment}
