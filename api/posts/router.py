"""
Post API endpoints.
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

posts_collection = db.collection_dependency(db.POSTS)

logger = logging.getLogger(__name__)


@router.get("/posts", response_model=schemas.PostResponse | schemas.PostListResponse)
async def get_posts(
    post_id: int | None = Query(default=None, alias="id"),
    category: int | None = Query(default=None),
    n_posts: int = Query(default=db.MAX_PAGE_SIZE, alias="nPosts", ge=0),
    collection: AsyncCollection = Depends(posts_collection),
) -> schemas.PostResponse | schemas.PostListResponse:
    """
    Without `id`, list up to `nPosts` posts (capped at 50), optionally within
    `category`. With `id`, return that single post.
    """
    if post_id is None:
        with store_errors("Couldn't get all posts"):
            rows = await repository.list_posts(collection, count=n_posts, category=category or 0)
        return schemas.PostListResponse(posts=documents_to_models(schemas.Post, rows, collection=db.POSTS))

    with store_errors("Couldn't get a post by ID"):
        row = await repository.get_post(collection, post_id, category=category)
    post = document_to_model(schemas.Post, row, collection=db.POSTS) if row is not None else None
    if post is None:
        raise not_found("post")
    return schemas.PostResponse(post=post)


@router.post("/post", response_model=EmptyResponse)
async def new_post(
    post_id: int = Form(..., alias="id"),
    category: int = Form(...),
    title: str = Form(default=""),
    subtitle: str = Form(default=""),
    post_type: str = Form(default="", alias="type"),
    content: str = Form(default=""),
    image_link: str = Form(default="", alias="imageLink"),
    resource_link: str = Form(default="", alias="resourceLink"),
    canonical_link: str = Form(default="", alias="canonicalLink"),
    show_in_menu: bool = Form(default=False, alias="showInMenu"),
    collection: AsyncCollection = Depends(posts_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't create a post"):
        await repository.create_post(
            collection,
            post_id=post_id,
            category=category,
            title=title,
            subtitle=subtitle,
            post_type=post_type,
            content=content,
            image_link=image_link,
            resource_link=resource_link,
            canonical_link=canonical_link,
            show_in_menu=show_in_menu,
        )
    logger.info("post_created id=%s category=%s by=%s", post_id, category, current_user["zid"])
    return EmptyResponse()


@router.put("/post", response_model=EmptyResponse)
async def update_post(
    post_id: int = Form(..., alias="id"),
    category: int | None = Form(default=None),
    title: str | None = Form(default=None),
    subtitle: str | None = Form(default=None),
    post_type: str | None = Form(default=None, alias="type"),
    content: str | None = Form(default=None),
    image_link: str | None = Form(default=None, alias="imageLink"),
    resource_link: str | None = Form(default=None, alias="resourceLink"),
    canonical_link: str | None = Form(default=None, alias="canonicalLink"),
    show_in_menu: bool | None = Form(default=None, alias="showInMenu"),
    collection: AsyncCollection = Depends(posts_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    """
    Replace the supplied fields of a post. Updating a missing post is a no-op.
    """
    with store_errors("Couldn't update a post"):
        matched = await repository.update_post(
            collection,
            post_id,
            category=category,
            title=title,
            subtitle=subtitle,
            post_type=post_type,
            content=content,
            image_link=image_link,
            resource_link=resource_link,
            canonical_link=canonical_link,
            show_in_menu=show_in_menu,
        )
    logger.info("post_updated id=%s matched=%s by=%s", post_id, matched, current_user["zid"])
    return EmptyResponse()


@router.delete("/post", response_model=EmptyResponse)
async def delete_post(
    post_id: int = Form(..., alias="id"),
    collection: AsyncCollection = Depends(posts_collection),
    current_user: dict = Depends(auth_dependencies.require_editor),
) -> EmptyResponse:
    with store_errors("Couldn't delete a post"):
        deleted = await repository.delete_post(collection, post_id)
    logger.info("post_deleted id=%s deleted=%s by=%s", post_id, deleted, current_user["zid"])
    return EmptyResponse()
