# news_api/db/base.py
from sqlalchemy import Column, DateTime, ForeignKey, Integer, MetaData, String, Table, Text, func, text

from news_api.config import DEFAULT_ARTICLE_IMG_URL


metadata = MetaData()

topics = Table(
    "topics",
    metadata,
    Column("slug", String, primary_key=True),
    Column("description", String),
)

users = Table(
    "users",
    metadata,
    Column("username", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("avatar_url", String),
)

articles = Table(
    "articles",
    metadata,
    Column("article_id", Integer, primary_key=True, autoincrement=True),
    Column("title", String, nullable=False),
    Column("topic", String, ForeignKey("topics.slug"), nullable=False),
    Column("author", String, ForeignKey("users.username"), nullable=False),
    Column("body", Text, nullable=False),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Column("votes", Integer, nullable=False, server_default=text("0")),
    Column("article_img_url", String(1000), server_default=DEFAULT_ARTICLE_IMG_URL),
)

comments = Table(
    "comments",
    metadata,
    Column("comment_id", Integer, primary_key=True, autoincrement=True),
    Column("body", Text, nullable=False),
    Column("article_id", Integer, ForeignKey("articles.article_id", ondelete="CASCADE"), nullable=False),
    Column("author", String, ForeignKey("users.username"), nullable=False),
    Column("votes", Integer, nullable=False, server_default=text("0")),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
)
