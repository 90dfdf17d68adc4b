"""
End-to-end checks against a real PostgreSQL database.

Every test reseeds the development data set, so point TEST_DATABASE_URL at a
throwaway database (plain ``postgresql://`` DSN). Skipped when it is unset.
"""

from __future__ import annotations

import asyncio
import math
import os

import pytest

asyncpg = pytest.importorskip("asyncpg")

TEST_DSN = os.getenv("TEST_DATABASE_URL")

pytestmark = pytest.mark.skipif(not TEST_DSN, reason="TEST_DATABASE_URL is not set")

from fastapi.testclient import TestClient  # noqa: E402

from news_api.db import dev_data  # noqa: E402
from news_api.db.queries import SORT_COLUMNS  # noqa: E402

TOTAL = len(dev_data.ARTICLES)
TEXT_COLUMNS = {"author", "title", "topic", "article_img_url"}


async def _fetch_values(sql: str) -> list:
    conn = await asyncpg.connect(TEST_DSN)
    try:
        return [r[0] for r in await conn.fetch(sql)]
    finally:
        await conn.close()


@pytest.fixture()
def db_client(monkeypatch):
    from news_api.db import pool as db_pool
    from news_api.db.seed import seed
    from news_api.main import create_app

    asyncio.run(seed(TEST_DSN))
    monkeypatch.setattr(db_pool, "DB_DSN", TEST_DSN)

    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.mark.parametrize("sort_by", sorted(SORT_COLUMNS))
@pytest.mark.parametrize("order", ["asc", "desc"])
def test_listing_sorted_for_every_allowed_pair(db_client, sort_by, order):
    resp = db_client.get(f"/api/articles?sort_by={sort_by}&order={order}&limit={TOTAL}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_count"] == TOTAL
    keys = [a[sort_by] for a in body["articles"]]
    assert len(keys) == TOTAL

    if sort_by in TEXT_COLUMNS:
        # text ordering follows the database collation
        expected = asyncio.run(_fetch_values(f"SELECT {sort_by} FROM articles ORDER BY {sort_by} {order.upper()}"))
    else:
        expected = sorted(keys, reverse=order == "desc")
    assert keys == expected


@pytest.mark.parametrize("limit", [1, 3, 5, 10, 13, 20])
def test_pages_cover_filtered_set_then_run_empty(db_client, limit):
    pages = math.ceil(TOTAL / limit)
    seen: list[int] = []
    for page in range(1, pages + 1):
        body = db_client.get(f"/api/articles?limit={limit}&p={page}").json()
        assert body["total_count"] == TOTAL
        assert 0 < len(body["articles"]) <= limit
        seen.extend(a["article_id"] for a in body["articles"])
    assert sorted(seen) == sorted(a["article_id"] for a in dev_data.ARTICLES)

    after = db_client.get(f"/api/articles?limit={limit}&p={pages + 1}")
    assert after.status_code == 200
    assert after.json() == {"articles": [], "total_count": TOTAL}


def test_default_listing_second_page(db_client):
    body = db_client.get("/api/articles?p=2").json()
    assert [a["article_id"] for a in body["articles"]] == [8, 11, 7]
    body = db_client.get("/api/articles?limit=5&p=2").json()
    assert [a["article_id"] for a in body["articles"]] == [5, 1, 9, 10, 4]


def test_topic_filters(db_client):
    mitch = db_client.get("/api/articles?topic=mitch&limit=5").json()
    assert mitch["total_count"] == 12
    assert len(mitch["articles"]) == 5
    assert all(a["topic"] == "mitch" for a in mitch["articles"])

    paper = db_client.get("/api/articles?topic=paper")
    assert paper.status_code == 200
    assert paper.json() == {"articles": [], "total_count": 0}

    banana = db_client.get("/api/articles?topic=banana")
    assert banana.status_code == 404
    assert banana.json() == {"msg": "404: Not found"}


def test_article_by_id_with_comment_count(db_client):
    article = db_client.get("/api/articles/1").json()["article"]
    assert article["author"] == "butter_bridge"
    assert article["title"] == "Living in the shadow of a great man"
    assert article["votes"] == 100
    assert article["comment_count"] == 11

    assert db_client.get("/api/articles/2").json()["article"]["comment_count"] == 0
    assert db_client.get("/api/articles/99999").status_code == 404
    assert db_client.get("/api/articles/notAnId").status_code == 400
    assert db_client.get("/api/articles/99999999999").status_code == 400


def test_article_votes_are_exact(db_client):
    up = db_client.patch("/api/articles/2", json={"inc_votes": 8})
    assert up.status_code == 200
    assert up.json()["article"]["votes"] == 8

    down = db_client.patch("/api/articles/1", json={"inc_votes": -5})
    assert down.json()["article"]["votes"] == 95
    assert down.json()["article"]["comment_count"] == 11

    assert db_client.patch("/api/articles/99999", json={"inc_votes": 1}).status_code == 404


def test_comment_votes_may_go_negative(db_client):
    resp = db_client.patch("/api/comments/1", json={"inc_votes": -20})
    assert resp.status_code == 200
    assert resp.json()["comment"]["votes"] == -4


def test_comments_listing(db_client):
    comments = db_client.get("/api/articles/1/comments").json()["comments"]
    assert len(comments) == 11
    stamps = [c["created_at"] for c in comments]
    assert stamps == sorted(stamps, reverse=True)

    assert db_client.get("/api/articles/2/comments").json() == {"comments": []}
    assert db_client.get("/api/articles/99999/comments").status_code == 404


def test_post_comment_then_list(db_client):
    resp = db_client.post("/api/articles/2/comments", json={"username": "lurker", "body": "First!"})
    assert resp.status_code == 201
    comment = resp.json()["comment"]
    assert comment["votes"] == 0 and comment["article_id"] == 2 and comment["author"] == "lurker"

    listed = db_client.get("/api/articles/2/comments").json()["comments"]
    assert [c["comment_id"] for c in listed] == [comment["comment_id"]]
    assert db_client.get("/api/articles/2").json()["article"]["comment_count"] == 1

    unknown_user = db_client.post("/api/articles/2/comments", json={"username": "nobody", "body": "hi"})
    assert unknown_user.status_code == 400


def test_post_article_defaults(db_client):
    resp = db_client.post(
        "/api/articles",
        json={"author": "butter_bridge", "title": "Happy Go Lucky", "body": "Words", "topic": "paper"},
    )
    assert resp.status_code == 201
    article = resp.json()["article"]
    assert article["votes"] == 0
    assert article["comment_count"] == 0
    assert article["article_id"] == TOTAL + 1
    assert "pexels-photo-97050" in article["article_img_url"]

    bad_topic = db_client.post(
        "/api/articles",
        json={"author": "butter_bridge", "title": "T", "body": "B", "topic": "nope"},
    )
    assert bad_topic.status_code == 400


def test_delete_comment_twice(db_client):
    first = db_client.delete("/api/comments/1")
    assert first.status_code == 204
    assert first.content == b""

    second = db_client.delete("/api/comments/1")
    assert second.status_code == 404
    assert second.json() == {"msg": "404: Not found"}
