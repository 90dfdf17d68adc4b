from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

# Ensure repository root is on sys.path for `import news_api`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient


class FakeConnection:
    """
    Stand-in for an asyncpg connection.

    Responses are matched by SQL substring, first match wins. A response that
    is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: list[tuple[str, Any]] | None = None):
        self.responses = list(responses or [])
        self.calls: list[tuple[str, str, tuple]] = []

    def on(self, fragment: str, result: Any) -> "FakeConnection":
        self.responses.append((fragment, result))
        return self

    def _match(self, method: str, sql: str, args: tuple) -> Any:
        self.calls.append((method, sql, args))
        for fragment, result in self.responses:
            if fragment in sql:
                if isinstance(result, BaseException):
                    raise result
                return result
        raise AssertionError(f"unexpected query: {sql}")

    async def fetch(self, sql: str, *args):
        return self._match("fetch", sql, args)

    async def fetchrow(self, sql: str, *args):
        return self._match("fetchrow", sql, args)

    async def execute(self, sql: str, *args):
        return self._match("execute", sql, args)


@pytest.fixture()
def fake_conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture()
def client(monkeypatch, fake_conn):
    # Patch pool creation in lifespan to no-op
    import news_api.db.pool as db_pool

    async def _create(*args, **kwargs):
        return None

    async def _close(*args, **kwargs):
        return None

    monkeypatch.setattr(db_pool, "create_pool", _create)
    monkeypatch.setattr(db_pool, "close_pool", _close)

    from news_api import main as main_mod

    async def fake_connection():
        yield fake_conn

    app = main_mod.app
    app.dependency_overrides[db_pool.get_connection] = fake_connection

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def article_row() -> dict:
    return {
        "article_id": 1,
        "author": "butter_bridge",
        "title": "Living in the shadow of a great man",
        "body": "I find this existence challenging",
        "topic": "mitch",
        "created_at": datetime(2020, 7, 9, 20, 11),
        "votes": 100,
        "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
        "comment_count": 11,
    }


@pytest.fixture()
def comment_row() -> dict:
    return {
        "comment_id": 10,
        "article_id": 3,
        "author": "icellusedkars",
        "body": "git push origin master",
        "votes": 0,
        "created_at": datetime(2020, 6, 20, 7, 24),
    }
