"""
Post persistence (`posts` collection).

Every function performs exactly one document-store operation. Driver errors
propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any

from pymongo.asynchronous.collection import AsyncCollection

from core import db


async def get_post(
    collection: AsyncCollection,
    post_id: int,
    *,
    category: int | None = None,
) -> dict[str, Any] | None:
    query: dict[str, Any] = {"id": post_id}
    if category is not None:
        query["category"] = category
    return await collection.find_one(query, db.NO_ID)


async def list_posts(
    collection: AsyncCollection,
    *,
    count: int,
    category: int = 0,
) -> list[dict[str, Any]]:
    """
    Return up to min(count, 50) posts, optionally restricted to one category.

    Ordering is whatever the store returns (natural order); callers must not
    rely on it.
    """
    limit = db.capped_limit(count)
    # Mongo reads limit(0) as "no limit".
    if limit <= 0:
        return []

    query: dict[str, Any] = {} if category == 0 else {"category": category}
    cursor = collection.find(query, db.NO_ID).limit(limit)
    return [document async for document in cursor]


async def create_post(
    collection: AsyncCollection,
    *,
    post_id: int,
    category: int,
    title: str = "",
    subtitle: str = "",
    post_type: str = "",
    content: str = "",
    image_link: str = "",
    resource_link: str = "",
    canonical_link: str = "",
    show_in_menu: bool = False,
) -> dict[str, Any]:
    document = {
        "id": post_id,
        "category": category,
        "title": title,
        "subtitle": subtitle,
        "type": post_type,
        "created_on": db.now_epoch_s(),
        "last_edited_on": 0,
        "content": content,
        "image_link": image_link,
        "resource_link": resource_link,
        "canonical_link": canonical_link,
        "show_in_menu": show_in_menu,
    }
    await collection.insert_one(document)
    document.pop("_id", None)
    return document


async def update_post(
    collection: AsyncCollection,
    post_id: int,
    *,
    category: int | None = None,
    title: str | None = None,
    subtitle: str | None = None,
    post_type: str | None = None,
    content: str | None = None,
    image_link: str | None = None,
    resource_link: str | None = None,
    canonical_link: str | None = None,
    show_in_menu: bool | None = None,
) -> bool:
    """
    Overwrite the supplied fields of the post with `post_id` and stamp
    `last_edited_on`. Returns False when no post matched; that is not an error.
    """
    fields = {
        "category": category,
        "title": title,
        "subtitle": subtitle,
        "type": post_type,
        "content": content,
        "image_link": image_link,
        "resource_link": resource_link,
        "canonical_link": canonical_link,
        "show_in_menu": show_in_menu,
    }
    changes = {key: value for key, value in fields.items() if value is not None}
    changes["last_edited_on"] = db.now_epoch_s()

    result = await collection.update_one({"id": post_id}, {"$set": changes})
    return result.matched_count > 0


async def delete_post(collection: AsyncCollection, post_id: int) -> bool:
    result = await collection.delete_one({"id": post_id})
    return result.deleted_count > 0
