import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from news_api.api import articles
from news_api.api import comments as comments_api
from news_api.api import docs as docs_api
from news_api.api import topics as topics_api
from news_api.api import users as users_api
from news_api.config import LOG_LEVEL, ROOT_PATH
from news_api.core.errors import register_error_handlers
from news_api.db import pool as db_pool


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The pool lives on app.state and reaches handlers through get_connection
    app.state.pool = await db_pool.create_pool()
    try:
        yield
    finally:
        await db_pool.close_pool(app.state.pool)
        app.state.pool = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="News API",
        lifespan=lifespan,
        root_path=ROOT_PATH,
    )
    app.include_router(docs_api.router)
    app.include_router(topics_api.router)
    app.include_router(articles.router)
    app.include_router(comments_api.router)
    app.include_router(users_api.router)
    register_error_handlers(app)
    return app


app = create_app()

# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
