# news_api/api/users.py
from fastapi import APIRouter, Depends

import asyncpg

from news_api.db.pool import get_connection
from news_api.models.schemas import UserEnvelope, UserList
from news_api.services import users as svc

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=UserList)
async def api_list_users(conn: asyncpg.Connection = Depends(get_connection)):
    return {"users": await svc.list_users(conn)}


@router.get("/{username}", response_model=UserEnvelope)
async def api_get_user(username: str, conn: asyncpg.Connection = Depends(get_connection)):
    return {"user": await svc.get_user(conn, username)}
