# news_api/models/schemas.py
from fastapi import Path
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from typing import Annotated, Optional, List, Dict, Any
from datetime import datetime


# ids and vote counts are int4 columns
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
VoteDelta = Annotated[StrictInt, Field(ge=INT4_MIN, le=INT4_MAX)]
RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]


# --- Topics / users ---
class Topic(BaseModel):
    slug: str
    description: Optional[str] = None


class User(BaseModel):
    username: str
    name: str
    avatar_url: Optional[str] = None


# --- Articles ---
# Used for list requests (no body)
class ArticleSummary(BaseModel):
    article_id: int
    author: str
    title: str
    topic: str
    created_at: datetime
    votes: int
    article_img_url: Optional[str] = None
    comment_count: int = 0


# Used for single-article responses
class Article(ArticleSummary):
    body: str


class Comment(BaseModel):
    comment_id: int
    article_id: int
    author: str
    body: str
    votes: int
    created_at: datetime


# --- Request bodies ---
class NewArticle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    author: NonEmptyStr
    title: NonEmptyStr
    body: NonEmptyStr
    topic: NonEmptyStr
    article_img_url: Optional[StrictStr] = None


class NewComment(BaseModel):
    model_config = ConfigDict(extra="ignore")

    username: NonEmptyStr
    body: NonEmptyStr


class VoteUpdate(BaseModel):
    inc_votes: VoteDelta


# --- Response envelopes ---
class TopicList(BaseModel):
    topics: List[Topic]


class ArticleEnvelope(BaseModel):
    article: Article


class ArticleList(BaseModel):
    articles: List[ArticleSummary]
    total_count: int


class CommentEnvelope(BaseModel):
    comment: Comment


class CommentList(BaseModel):
    comments: List[Comment]


class UserEnvelope(BaseModel):
    user: User


class UserList(BaseModel):
    users: List[User]


class Endpoints(BaseModel):
    endpoints: Dict[str, Any]
