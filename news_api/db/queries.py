# news_api/db/queries.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from news_api.core.errors import BadRequest


# query-string value -> SQL identifier; the only way a column name reaches SQL
SORT_COLUMNS = {
    "author": "articles.author",
    "article_id": "articles.article_id",
    "title": "articles.title",
    "topic": "articles.topic",
    "created_at": "articles.created_at",
    "votes": "articles.votes",
    "article_img_url": "articles.article_img_url",
    "comment_count": "comment_count",
}

ORDERS = {
    "asc": "ASC",
    "desc": "DESC",
}

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"
DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1

ARTICLE_SUMMARY_COLUMNS = """
    articles.author,
    articles.title,
    articles.article_id,
    articles.topic,
    articles.created_at,
    articles.votes,
    articles.article_img_url,
    COUNT(comments.comment_id)::int AS comment_count
"""


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _positive_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    text = str(value)
    # LIMIT and OFFSET are bigint; longer digit strings cannot be valid
    if not text.isascii() or not text.isdecimal() or len(text) > 18:
        raise BadRequest()
    try:
        number = int(text)
    except ValueError:
        raise BadRequest() from None
    if number < 1:
        raise BadRequest()
    return number


@dataclass(frozen=True)
class ArticleListQuery:
    """Validated listing parameters for GET /api/articles.

    Built only through `from_params`, so an instance always holds an
    allow-listed sort column and direction.
    """

    sort_by: str = DEFAULT_SORT_BY
    order: str = DEFAULT_ORDER
    topic: Optional[str] = None
    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE

    @classmethod
    def from_params(
        cls,
        sort_by: Optional[str] = None,
        order: Optional[str] = None,
        topic: Optional[str] = None,
        limit: Optional[str] = None,
        page: Optional[str] = None,
    ) -> "ArticleListQuery":
        # only an absent value takes the default; "" and "DESC" are rejected
        sort_key = DEFAULT_SORT_BY if sort_by is None else sort_by
        order_key = DEFAULT_ORDER if order is None else order
        if sort_key not in SORT_COLUMNS or order_key not in ORDERS:
            raise BadRequest()
        return cls(
            sort_by=sort_key,
            order=order_key,
            topic=None if _blank(topic) else str(topic).strip(),
            limit=_positive_int(limit, DEFAULT_LIMIT),
            page=_positive_int(page, DEFAULT_PAGE),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def _where(self, args: List[Any]) -> str:
        if self.topic is None:
            return ""
        args.append(self.topic)
        return "WHERE articles.topic = $%d" % len(args)

    def select_sql(self) -> Tuple[str, List[Any]]:
        args: List[Any] = []
        where_sql = self._where(args)
        column = SORT_COLUMNS[self.sort_by]
        direction = ORDERS[self.order]
        args.extend([self.limit, self.offset])
        limit_idx, offset_idx = len(args) - 1, len(args)
        sql = f"""
        SELECT {ARTICLE_SUMMARY_COLUMNS}
        FROM articles
        LEFT JOIN comments ON comments.article_id = articles.article_id
        {where_sql}
        GROUP BY articles.article_id
        ORDER BY {column} {direction}, articles.article_id {direction}
        LIMIT ${limit_idx} OFFSET ${offset_idx}
        """
        return sql, args

    def count_sql(self) -> Tuple[str, List[Any]]:
        args: List[Any] = []
        where_sql = self._where(args)
        sql = f"""
        SELECT COUNT(*)::int AS total_count
        FROM articles
        {where_sql}
        """
        return sql, args


__all__ = [
    "SORT_COLUMNS",
    "ORDERS",
    "ARTICLE_SUMMARY_COLUMNS",
    "ArticleListQuery",
]
