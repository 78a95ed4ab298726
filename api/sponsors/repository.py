"""
Sponsor persistence (`sponsors` collection).

Sponsor ids are UUID4 strings generated here at creation time.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID, uuid4

from pymongo.asynchronous.collection import AsyncCollection

from core import db


async def get_sponsor(collection: AsyncCollection, sponsor_id: UUID) -> dict[str, Any] | None:
    return await collection.find_one({"id": str(sponsor_id)}, db.NO_ID)


async def list_sponsors(collection: AsyncCollection, *, count: int) -> list[dict[str, Any]]:
    limit = db.capped_limit(count)
    if limit <= 0:
        return []
    cursor = collection.find({}, db.NO_ID).limit(limit)
    return [document async for document in cursor]


async def create_sponsor(
    collection: AsyncCollection,
    *,
    name: str,
    logo: str = "",
    tier: str = "",
    link: str = "",
    expiry: int,
) -> dict[str, Any]:
    document = {
        "id": str(uuid4()),
        "name": name,
        "logo": logo,
        "tier": tier,
        "link": link,
        "expiry": expiry,
    }
    await collection.insert_one(document)
    document.pop("_id", None)
    return document


async def delete_sponsor(collection: AsyncCollection, sponsor_id: UUID) -> bool:
    result = await collection.delete_one({"id": str(sponsor_id)})
    return result.deleted_count > 0
