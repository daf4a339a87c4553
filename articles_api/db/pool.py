# articles_api/db/pool.py
import asyncio
import asyncpg
from typing import Any, Dict, Optional
from articles_api import config


class PoolNotInitializedError(RuntimeError):
    pass


# Failures raised by the driver, the socket underneath it, or a missing pool
DB_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
    PoolNotInitializedError,
)

_pool: Optional[asyncpg.pool.Pool] = None


def connect_kwargs() -> Dict[str, Any]:
    if config.DB_DSN:
        return {"dsn": config.DB_DSN}
    params = {
        "user": config.DB_USER,
        "host": config.DB_HOST,
        "database": config.DB_NAME,
        "password": config.DB_PASSWORD,
        "port": config.DB_PORT,
    }
    # unset parameters fall back to asyncpg/libpq defaults (PG* env vars)
    return {k: v for k, v in params.items() if v is not None}


async def connect_db():
    global _pool
    if _pool is None:
        # min_size=0 defers the first connection to the first query
        _pool = await asyncpg.create_pool(min_size=0, max_size=10, **connect_kwargs())


async def close_db():
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


def pool():
    if _pool is None:
        raise PoolNotInitializedError("Database pool is not initialized. Call connect_db() first.")
    return _pool
