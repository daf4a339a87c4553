from contextlib import asynccontextmanager

import asyncpg
import pytest
import sys
from pathlib import Path

# Ensure repository root is on sys.path for `import articles_api`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from fastapi.testclient import TestClient

from articles_api.db import queries


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


def _check_not_null(**columns):
    # Mirrors the NOT NULL constraints of the articles table
    for column, value in columns.items():
        if value is None:
            raise asyncpg.exceptions.NotNullViolationError(
                f'null value in column "{column}" of relation "articles" violates not-null constraint'
            )


class FakeConnection:
    """Answers the statements from articles_api.db.queries against a dict of rows."""

    def __init__(self, db: "FakeDatabase"):
        self.db = db

    def _record(self, sql, args):
        self.db.statements.append((sql, args))
        if self.db.fail_with is not None:
            raise self.db.fail_with

    async def execute(self, sql, *args):
        self._record(sql, args)
        if sql == queries.CREATE_ARTICLES_TABLE:
            return "CREATE TABLE"
        raise AssertionError(f"unexpected statement: {sql}")

    async def fetch(self, sql, *args):
        self._record(sql, args)
        if sql == queries.SELECT_ALL_ARTICLES:
            return [dict(self.db.rows[i]) for i in sorted(self.db.rows)]
        raise AssertionError(f"unexpected statement: {sql}")

    async def fetchval(self, sql, *args):
        self._record(sql, args)
        if sql == queries.COUNT_BY_TITLE:
            return sum(1 for r in self.db.rows.values() if r["title"] == args[0])
        raise AssertionError(f"unexpected statement: {sql}")

    async def fetchrow(self, sql, *args):
        self._record(sql, args)
        rows = self.db.rows
        if sql == queries.INSERT_ARTICLE:
            title, content, author = args
            _check_not_null(title=title, content=content, author=author)
            article_id = self.db.next_id
            self.db.next_id += 1
            rows[article_id] = {"id": article_id, "title": title, "content": content, "author": author}
            return dict(rows[article_id])
        if sql == queries.UPDATE_ARTICLE:
            article_id, title, content, author = args
            if article_id not in rows:
                return None
            _check_not_null(title=title, content=content, author=author)
            rows[article_id].update(title=title, content=content, author=author)
            return dict(rows[article_id])
        if sql == queries.UPDATE_ARTICLE_TITLE:
            article_id, title = args
            if article_id not in rows:
                return None
            rows[article_id]["title"] = title
            return dict(rows[article_id])
        if sql == queries.DELETE_ARTICLE:
            removed = rows.pop(args[0], None)
            return dict(removed) if removed else None
        raise AssertionError(f"unexpected statement: {sql}")


class FakeDatabase:
    """Stands in for an asyncpg pool: acquire() hands out FakeConnection."""

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.statements = []
        self.fail_with = None
        self.closed = False

    def add(self, title, content="content", author="author"):
        article_id = self.next_id
        self.next_id += 1
        self.rows[article_id] = {"id": article_id, "title": title, "content": content, "author": author}
        return article_id

    @asynccontextmanager
    async def acquire(self):
        yield FakeConnection(self)

    async def close(self):
        self.closed = True


@pytest.fixture()
def fake_db(monkeypatch):
    import articles_api.db.pool as db_pool

    db = FakeDatabase()
    monkeypatch.setattr(db_pool, "_pool", db)
    return db


@pytest.fixture()
def client(fake_db):
    from articles_api import main as main_mod

    with TestClient(main_mod.app) as test_client:
        yield test_client
