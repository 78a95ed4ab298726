"""
Pydantic schemas for post endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Post(BaseModel):
    id: int
    category: int
    title: str = ""
    subtitle: str = ""
    type: str = ""
    created_on: int = 0
    last_edited_on: int = 0
    content: str = ""
    image_link: str = ""
    resource_link: str = ""
    canonical_link: str = ""
    show_in_menu: bool = False


class PostResponse(BaseModel):
    post: Post


class PostListResponse(BaseModel):
    posts: list[Post]
