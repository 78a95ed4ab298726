"""
Category persistence (`categories` collection).

Category ids are supplied by the caller, never generated by the store.
"""

from __future__ import annotations

from typing import Any

from pymongo.asynchronous.collection import AsyncCollection

from core import db


async def get_category(collection: AsyncCollection, category_id: int) -> dict[str, Any] | None:
    return await collection.find_one({"id": category_id}, db.NO_ID)


async def list_categories(collection: AsyncCollection, *, count: int = 0) -> list[dict[str, Any]]:
    """
    Return up to min(count, 50) categories.

    Unlike posts and sponsors, `count == 0` means "no limit" here: the menu
    asks for every category without passing a count.
    """
    cursor = collection.find({}, db.NO_ID)
    if count > 0:
        cursor = cursor.limit(db.capped_limit(count))
    return [document async for document in cursor]


async def create_category(
    collection: AsyncCollection,
    *,
    category_id: int,
    name: str,
    index: int = 0,
) -> dict[str, Any]:
    document = {"id": category_id, "name": name, "index": index}
    await collection.insert_one(document)
    document.pop("_id", None)
    return document


async def update_category(
    collection: AsyncCollection,
    category_id: int,
    *,
    name: str | None = None,
    index: int | None = None,
) -> bool:
    changes: dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    if index is not None:
        changes["index"] = index
    if not changes:
        return False

    result = await collection.update_one({"id": category_id}, {"$set": changes})
    return result.matched_count > 0


async def delete_category(collection: AsyncCollection, category_id: int) -> bool:
    result = await collection.delete_one({"id": category_id})
    return result.deleted_count > 0
