from contextlib import asynccontextmanager

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from articles_api import config
from articles_api.api import articles
from articles_api.core.errors import ArticleStorageError, register_exception_handlers
from articles_api.db import pool as db_pool
from articles_api.services import articles as svc

# Basic logging configuration (can be overridden by server config)
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("articles_api.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await db_pool.connect_db()
    # Schema bootstrap runs once per process; a failure is logged and
    # the service keeps answering (every query then reports the error)
    try:
        await svc.init_schema()
        logger.info(
            "articles table created or already exists",
            extra={"event": "schema_ready"},
        )
    except ArticleStorageError as exc:
        logger.error(
            "Failed to create articles table: %s", exc,
            extra={"event": "schema_failed"},
        )
    try:
        yield
    finally:
        await db_pool.close_db()


app = FastAPI(
    title="Articles API",
    lifespan=lifespan,
    root_path=config.ROOT_PATH,
)
register_exception_handlers(app)
app.include_router(articles.router)


@app.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root() -> str:
    return "Hello from your Articles API!"


def run() -> None:
    logger.info(
        "Listening on %s:%s", config.HOST, config.PORT,
        extra={"event": "server_start"},
    )
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
