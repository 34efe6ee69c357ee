from __future__ import annotations

import logging
from typing import Optional

from surrealdb import AsyncSurreal

from repositories.record_repo import StorageError
from settings.config import settings

logger = logging.getLogger(__name__)


# Shared connection; only ever holds a client that is signed in with ns/db selected.
db: Optional[AsyncSurreal] = None


async def _connect() -> AsyncSurreal:
    client = AsyncSurreal(settings.SURREALDB_URL)
    try:
        await client.signin({
            "username": settings.SURREALDB_USER,
            "password": settings.SURREALDB_PASS,
        })
        await client.use(settings.SURREALDB_NS, settings.SURREALDB_DB)
    except Exception as e:
        logger.error("Could not connect to SurrealDB at %s: %s", settings.SURREALDB_URL, e)
        try:
            await client.close()
        except Exception as close_exc:
            logger.warning("Error closing failed SurrealDB client: %s", close_exc)
        raise StorageError(f"Could not connect to SurrealDB at {settings.SURREALDB_URL}") from e
    return client


# --- Lifecycle management ---
async def init_db() -> AsyncSurreal:
    """
    Open the shared SurrealDB connection.
    A failed attempt leaves no connection behind, so the next call retries.
    """
    global db
    logger.info("Connecting to SurrealDB at %s (ns=%s, db=%s)", settings.SURREALDB_URL, settings.SURREALDB_NS, settings.SURREALDB_DB)
    db = await _connect()
    return db


async def close_db() -> None:
    """Close SurrealDB connection on app shutdown."""
    global db
    if db is None:
        return
    client, db = db, None
    try:
        await client.close()
    except Exception as e:
        raise StorageError("Error closing app database connection") from e


# --- FastAPI dependencies ---
async def get_db() -> AsyncSurreal:
    """Return the shared client, connecting on first use or after a failed attempt."""
    if db is None:
        return await init_db()
    return db
