"""
Pydantic schemas for category endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Category(BaseModel):
    id: int
    name: str = ""
    index: int = 0


class CategoryResponse(BaseModel):
    category: Category


class CategoryListResponse(BaseModel):
    categories: list[Category]
