# news_api/api/topics.py
from fastapi import APIRouter, Depends

import asyncpg

from news_api.db.pool import get_connection
from news_api.models.schemas import TopicList
from news_api.services import topics as svc

router = APIRouter(prefix="/api/topics", tags=["topics"])


@router.get("", response_model=TopicList)
async def api_list_topics(conn: asyncpg.Connection = Depends(get_connection)):
    return {"topics": await svc.list_topics(conn)}
