"""Shared test fixtures: in-memory document store + FastAPI test client.

Every test gets a fresh FakeDatabase; `core.db.get_database` is overridden so
the routers and the auth dependency see it instead of a MongoDB server.
"""

from __future__ import annotations

import copy
import os
from types import SimpleNamespace
from typing import Any

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("MONGODB_URI", "mongodb://127.0.0.1:1")

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient
from pymongo.errors import PyMongoError

import main
from auth import repository as auth_repository
from auth import security
from core import db


def _matches(document: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in query.items())


def _project(document: dict[str, Any], projection: dict[str, Any] | None) -> dict[str, Any]:
    result = copy.deepcopy(document)
    if projection and projection.get("_id") == 0:
        result.pop("_id", None)
    return result


class FakeCursor:
    def __init__(self, documents: list[dict[str, Any]]):
        self._documents = documents
        self._limit = 0

    def limit(self, limit: int) -> "FakeCursor":
        self._limit = limit
        return self

    def __aiter__(self):
        documents = self._documents[: self._limit] if self._limit else self._documents
        return self._iterate(documents)

    async def _iterate(self, documents):
        for document in documents:
            yield document


class FakeCollection:
    """
    The subset of AsyncCollection the repositories use. Set `fail = True` to
    make every call raise like an unreachable server.
    """

    def __init__(self) -> None:
        self.documents: list[dict[str, Any]] = []
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise PyMongoError("server unavailable")

    async def find_one(self, query: dict[str, Any], projection: dict[str, Any] | None = None):
        self._check()
        for document in self.documents:
            if _matches(document, query):
                return _project(document, projection)
        return None

    def find(self, query: dict[str, Any], projection: dict[str, Any] | None = None) -> FakeCursor:
        self._check()
        return FakeCursor([_project(d, projection) for d in self.documents if _matches(d, query)])

    async def insert_one(self, document: dict[str, Any]):
        self._check()
        # pymongo adds the generated _id to the caller's dict.
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def update_one(self, query: dict[str, Any], update: dict[str, Any]):
        self._check()
        for document in self.documents:
            if _matches(document, query):
                document.update(update.get("$set", {}))
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, query: dict[str, Any]):
        self._check()
        for position, document in enumerate(self.documents):
            if _matches(document, query):
                del self.documents[position]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}
        self.reachable = True

    def __getitem__(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def command(self, name: str) -> dict[str, Any]:
        if not self.reachable:
            raise PyMongoError("server unavailable")
        return {"ok": 1.0}


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def dist_dir(tmp_path):
    dist = tmp_path / "dist"
    (dist / "js").mkdir(parents=True)
    (dist / "index.html").write_text("<html><body>spa</body></html>")
    (dist / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
    (dist / "js" / "app.js").write_text("console.log('app');")
    return dist


@pytest.fixture
def app(database, dist_dir):
    application = main.create_app(dist_path=str(dist_dir))
    application.dependency_overrides[db.get_database] = lambda: database
    return application


@pytest.fixture
async def client(app):
    # ASGITransport does not run the lifespan, so no MongoDB connection is made.
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


async def _token_for(database: FakeDatabase, *, zid: str, permissions: str) -> dict[str, str]:
    user = await auth_repository.create_user(
        database[db.USERS],
        zid=zid,
        first_name="Test",
        password_hash=security.hash_password("correct horse battery"),
        permissions=permissions,
    )
    token = security.build_access_token(user_id=user["id"], zid=user["zid"], permissions=permissions)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def auth_headers(database) -> dict[str, str]:
    return await _token_for(database, zid="z5000001", permissions="editor")


@pytest.fixture
async def viewer_headers(database) -> dict[str, str]:
    return await _token_for(database, zid="z5000002", permissions="viewer")
