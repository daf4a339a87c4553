"""Article store: every read and write against the ``articles`` table.

Each operation borrows one pooled connection and runs a single statement,
except ``create_article`` which checks the title first and inserts second.
The two steps are not atomic: concurrent creates with the same title can
both pass the check.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from articles_api.core.errors import (
    ArticleConflictError,
    ArticleNotFoundError,
    ArticleStorageError,
    ArticleValidationError,
    EmptyArticlesError,
)
from articles_api.db import queries
from articles_api.db.pool import DB_ERRORS, pool


logger = logging.getLogger("articles_api.store")


@asynccontextmanager
async def _connection() -> AsyncIterator[Any]:
    try:
        async with pool().acquire() as conn:
            yield conn
    except DB_ERRORS as exc:
        logger.error(
            "Database operation failed",
            extra={"event": "db_error", "error": str(exc)},
        )
        raise ArticleStorageError(str(exc)) from exc


async def init_schema() -> None:
    """Create the articles table unless it already exists."""
    async with _connection() as conn:
        await conn.execute(queries.CREATE_ARTICLES_TABLE)


async def list_articles() -> List[Dict[str, Any]]:
    async with _connection() as conn:
        rows = await conn.fetch(queries.SELECT_ALL_ARTICLES)
    if not rows:
        raise EmptyArticlesError("The articles table is empty.")
    return [dict(r) for r in rows]


async def title_exists(title: Optional[str]) -> bool:
    async with _connection() as conn:
        count = await conn.fetchval(queries.COUNT_BY_TITLE, title)
    return count > 0


async def create_article(
    title: Optional[str],
    content: Optional[str],
    author: Optional[str],
) -> Dict[str, Any]:
    if await title_exists(title):
        logger.warning(
            "Duplicate article title",
            extra={"event": "article_title_conflict", "title": title},
        )
        raise ArticleConflictError("An article with this title already exists")
    async with _connection() as conn:
        row = await conn.fetchrow(queries.INSERT_ARTICLE, title, content, author)
    logger.info("Article created", extra={"event": "article_created", "article_id": row["id"]})
    return dict(row)


async def replace_article(
    article_id: Optional[int],
    title: Optional[str],
    content: Optional[str],
    author: Optional[str],
) -> Dict[str, Any]:
    """Overwrite title, content and author of one article.

    Fields left out are sent as NULL, so the NOT NULL columns reject a
    partial body rather than silently keeping the old values.
    """
    if not article_id:
        raise ArticleValidationError("Article id is required")
    async with _connection() as conn:
        row = await conn.fetchrow(queries.UPDATE_ARTICLE, article_id, title, content, author)
    if row is None:
        _log_not_found(article_id)
        raise ArticleNotFoundError("No article found")
    return dict(row)


async def update_article_title(article_id: Optional[int], title: Optional[str]) -> Dict[str, Any]:
    if not article_id or not title:
        raise ArticleValidationError("Article id and new title are required")
    async with _connection() as conn:
        row = await conn.fetchrow(queries.UPDATE_ARTICLE_TITLE, article_id, title)
    if row is None:
        _log_not_found(article_id)
        raise ArticleNotFoundError("No article found")
    return dict(row)


async def delete_article(article_id: int) -> Dict[str, Any]:
    async with _connection() as conn:
        row = await conn.fetchrow(queries.DELETE_ARTICLE, article_id)
    if row is None:
        _log_not_found(article_id)
        raise ArticleNotFoundError("No article found")
    logger.info("Article deleted", extra={"event": "article_deleted", "article_id": article_id})
    return dict(row)


def _log_not_found(article_id: Any) -> None:
    logger.warning(
        "Article not found",
        extra={"event": "article_not_found", "article_id": article_id},
    )
