"""
Category API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Query
from pymongo.asynchronous.collection import AsyncCollection

from auth import dependencies as auth_dependencies
from core import db
from core.errors import not_found, store_errors
from core.schemas import EmptyResponse, document_to_model, documents_to_models

from . import repository, schemas

router = APIRouter()

categories_collection = db.collection_dependency(db.CATEGORIES)

logger = logging.getLogger(__name__)


@router.get("/category", response_model=schemas.CategoryListResponse)
async def get_all_categories(
    count: int = Query(default=0, ge=0),
    collection: AsyncCollection = Depends(categories_collection),
) -> schemas.CategoryListResponse:
    with store_errors("Couldn't get all categories"):
        rows = await repository.list_categories(collection, count=count)
    return schemas.CategoryListResponse(
        categories=documents_to_models(schemas.Category, rows, collection=db.CATEGORIES)
    )


@router.get("/category/{category_id}", response_model=schemas.CategoryResponse)
async def get_category(
    category_id: int,
    collection: AsyncCollection = Depends(categories_collection),
) -> schemas.CategoryResponse:
    with store_errors("Couldn't get a category by ID"):
        row = await repository.get_category(collection, category_id)
    category = document_to_model(schemas.Category, row, collection=db.CATEGORIES) if row is not None else None
    if category is None:
        raise not_found("category")
    return schemas.CategoryResponse(category=category)


@router.post("/category", response_model=EmptyResponse)
async def new_category(
    category_id: int = Form(..., alias="id"),
    name: str = Form(...),
    index: int = Form(default=0),
    collection: AsyncCollection = Depends(categories_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't create a category"):
        await repository.create_category(collection, category_id=category_id, name=name, index=index)
    logger.info("category_created id=%s by=%s", category_id, current_user["zid"])
    return EmptyResponse()


@router.patch("/category", response_model=EmptyResponse)
async def patch_category(
    category_id: int = Form(..., alias="id"),
    name: str | None = Form(default=None),
    index: int | None = Form(default=None),
    collection: AsyncCollection = Depends(categories_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't update a category"):
        matched = await repository.update_category(collection, category_id, name=name, index=index)
    logger.info("category_updated id=%s matched=%s by=%s", category_id, matched, current_user["zid"])
    return EmptyResponse()


@router.delete("/category", response_model=EmptyResponse)
async def delete_category(
    category_id: int = Form(..., alias="id"),
    collection: AsyncCollection = Depends(categories_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't delete a category"):
        deleted = await repository.delete_category(collection, category_id)
    logger.info("category_deleted id=%s deleted=%s by=%s", category_id, deleted, current_user["zid"])
    return EmptyResponse()
