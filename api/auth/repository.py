"""
Auth persistence helpers (`users` collection).
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pymongo.asynchronous.collection import AsyncCollection

from core import db


def normalize_zid(zid: str) -> str:
    return (zid or "").strip().lower()


async def create_user(
    collection: AsyncCollection,
    *,
    zid: str,
    first_name: str,
    password_hash: str,
    permissions: str,
    is_active: bool = True,
) -> dict[str, Any]:
    document = {
        "id": str(uuid4()),
        "zid": normalize_zid(zid),
        "first_name": first_name,
        "password_hash": password_hash,
        "permissions": permissions,
        "is_active": is_active,
        "created_on": db.now_epoch_s(),
    }
    await collection.insert_one(document)
    # insert_one stamps the ObjectId onto the dict it was given.
    document.pop("_id", None)
    return document


async def get_user_by_zid(collection: AsyncCollection, zid: str) -> dict[str, Any] | None:
    return await collection.find_one({"zid": normalize_zid(zid)}, db.NO_ID)


async def get_user_by_id(collection: AsyncCollection, user_id: str) -> dict[str, Any] | None:
    return await collection.find_one({"id": user_id}, db.NO_ID)
