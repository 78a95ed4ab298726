"""
MongoDB access helpers using pymongo's asyncio client.

The client is created once per process by the FastAPI lifespan (see
`api/main.py`) and kept on `app.state.mongo`. Handlers never import it; they
receive a database or collection handle through the dependencies below, and
pass that handle into the repository functions.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from fastapi import Depends, Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

POSTS = "posts"
CATEGORIES = "categories"
SPONSORS = "sponsors"
USERS = "users"

# Upper bound on documents returned by any list endpoint.
MAX_PAGE_SIZE = 50

# Projection applied to every read: Mongo's ObjectId is never exposed.
NO_ID: dict[str, Any] = {"_id": 0}

logger = logging.getLogger(__name__)


def create_client(
    uri: str,
    *,
    server_selection_timeout_ms: int = 5_000,
    timeout_ms: int = 10_000,
) -> AsyncMongoClient:
    return AsyncMongoClient(
        uri,
        serverSelectionTimeoutMS=server_selection_timeout_ms,
        timeoutMS=timeout_ms,
    )


async def ping(client: AsyncMongoClient) -> None:
    """
    Round trip to the server. Raises a PyMongoError when it is unreachable.
    """
    await client.admin.command("ping")


async def connect(
    uri: str,
    database: str,
    *,
    server_selection_timeout_ms: int = 5_000,
    timeout_ms: int = 10_000,
) -> tuple[AsyncMongoClient, AsyncDatabase]:
    """
    Create the client and check the connection once.

    Startup treats a failed ping as fatal, so the error is logged and re-raised.
    """
    client = create_client(
        uri,
        server_selection_timeout_ms=server_selection_timeout_ms,
        timeout_ms=timeout_ms,
    )
    try:
        await ping(client)
    except Exception:
        logger.exception("mongodb_ping_failed database=%s", database)
        await client.close()
        raise
    logger.info("mongodb_connected database=%s", database)
    return client, client[database]


def now_epoch_s() -> int:
    """
    Current time as stored in documents: whole unix seconds.
    """
    return int(time.time())


def capped_limit(count: int) -> int:
    return min(count, MAX_PAGE_SIZE)


def get_database(request: Request) -> AsyncDatabase:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("MongoDB is not connected. The app lifespan must run connect() first.")
    return database


def collection_dependency(name: str) -> Callable[..., AsyncCollection]:
    """
    Build a FastAPI dependency that yields one named collection.
    """

    def _collection(database: AsyncDatabase = Depends(get_database)) -> AsyncCollection:
        return database[name]

    _collection.__name__ = f"{name}_collection"
    return _collection
