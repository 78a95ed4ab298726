"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pymongo.asynchronous.collection import AsyncCollection

from . import dependencies, schemas, service

router = APIRouter(prefix="/auth")


@router.post("/register", response_model=schemas.AuthResponse)
async def register(
    payload: schemas.RegisterRequest,
    collection: AsyncCollection = Depends(dependencies.users_collection),
) -> schemas.AuthResponse:
    return await service.register(collection, payload)


@router.post("/login", response_model=schemas.AuthResponse)
async def login(
    payload: schemas.LoginRequest,
    collection: AsyncCollection = Depends(dependencies.users_collection),
) -> schemas.AuthResponse:
    return await service.login(collection, payload)


@router.get("/me", response_model=schemas.UserResponse)
async def me(current_user: dict = Depends(dependencies.get_current_user)) -> schemas.UserResponse:
    return service.me(current_user)
