# news_api/api/comments.py
from fastapi import APIRouter, Depends, Response, status

import asyncpg

from news_api.db.pool import get_connection
from news_api.models.schemas import CommentEnvelope, RowId, VoteUpdate
from news_api.services import comments as svc

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentEnvelope)
async def api_update_comment_votes(
    comment_id: RowId,
    payload: VoteUpdate,
    conn: asyncpg.Connection = Depends(get_connection),
):
    comment = await svc.update_comment_votes(conn, comment_id, payload.inc_votes)
    return {"comment": comment}


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def api_delete_comment(comment_id: RowId, conn: asyncpg.Connection = Depends(get_connection)):
    await svc.delete_comment(conn, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
