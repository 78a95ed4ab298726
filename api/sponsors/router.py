"""
Sponsor API endpoints.
"""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Query
from pymongo.asynchronous.collection import AsyncCollection

from auth import dependencies as auth_dependencies
from core import db
from core.errors import not_found, store_errors
from core.schemas import EmptyResponse, document_to_model, documents_to_models

from . import repository, schemas, service

router = APIRouter()

sponsors_collection = db.collection_dependency(db.SPONSORS)

logger = logging.getLogger(__name__)


@router.get("/sponsor", response_model=schemas.SponsorListResponse)
async def get_all_sponsors(
    count: int = Query(default=db.MAX_PAGE_SIZE, ge=0),
    collection: AsyncCollection = Depends(sponsors_collection),
) -> schemas.SponsorListResponse:
    with store_errors("Couldn't get all sponsors"):
        rows = await repository.list_sponsors(collection, count=count)
    return schemas.SponsorListResponse(sponsors=documents_to_models(schemas.Sponsor, rows, collection=db.SPONSORS))


@router.get("/sponsor/{sponsor_id}", response_model=schemas.SponsorResponse)
async def get_sponsor(
    sponsor_id: UUID,
    collection: AsyncCollection = Depends(sponsors_collection),
) -> schemas.SponsorResponse:
    with store_errors("Couldn't get a sponsor by ID"):
        row = await repository.get_sponsor(collection, sponsor_id)
    sponsor = document_to_model(schemas.Sponsor, row, collection=db.SPONSORS) if row is not None else None
    if sponsor is None:
        raise not_found("sponsor")
    return schemas.SponsorResponse(sponsor=sponsor)


@router.post("/sponsor", response_model=schemas.SponsorCreatedResponse)
async def new_sponsor(
    name: str = Form(...),
    expiry: str = Form(...),
    logo: str = Form(default=""),
    tier: str = Form(default=""),
    link: str = Form(default=""),
    collection: AsyncCollection = Depends(sponsors_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> schemas.SponsorCreatedResponse:
    expiry_s = service.parse_expiry(expiry)
    with store_errors("Couldn't create a sponsor"):
        row = await repository.create_sponsor(
            collection,
            name=name,
            logo=logo,
            tier=tier,
            link=link,
            expiry=expiry_s,
        )
    logger.info("sponsor_created id=%s expiry=%s by=%s", row["id"], expiry_s, current_user["zid"])
    return schemas.SponsorCreatedResponse(id=row["id"])


@router.delete("/sponsor", response_model=EmptyResponse)
async def delete_sponsor(
    sponsor_id: UUID = Form(..., alias="id"),
    collection: AsyncCollection = Depends(sponsors_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't delete a sponsor"):
        deleted = await repository.delete_sponsor(collection, sponsor_id)
    logger.info("sponsor_deleted id=%s deleted=%s by=%s", sponsor_id, deleted, current_user["zid"])
    return EmptyResponse()
