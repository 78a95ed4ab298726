"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from pymongo.asynchronous.collection import AsyncCollection

from core import config

from . import repository, schemas, security

# Permission strings allowed to create, change and delete content.
WRITE_PERMISSIONS = frozenset({"admin", "editor"})

logger = logging.getLogger(__name__)


def _to_user_response(user_row: dict) -> schemas.UserResponse:
    return schemas.UserResponse(
        id=str(user_row["id"]),
        zid=str(user_row["zid"]),
        first_name=str(user_row.get("first_name") or ""),
        permissions=str(user_row.get("permissions") or ""),
        is_active=bool(user_row.get("is_active", False)),
        created_on=int(user_row.get("created_on") or 0),
    )


def _issue_token(user_row: dict) -> schemas.TokenResponse:
    access_token = security.build_access_token(
        user_id=str(user_row["id"]),
        zid=str(user_row["zid"]),
        permissions=str(user_row.get("permissions") or ""),
    )
    return schemas.TokenResponse(
        access_token=access_token,
        expires_in=config.access_token_expire_minutes() * 60,
    )


async def register(collection: AsyncCollection, payload: schemas.RegisterRequest) -> schemas.AuthResponse:
    if not config.registration_enabled():
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Registration is disabled.",
        )

    existing = await repository.get_user_by_zid(collection, payload.zid)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="zID is already registered.",
        )

    password_hash = security.hash_password(payload.password)
    user_row = await repository.create_user(
        collection,
        zid=payload.zid,
        first_name=payload.first_name,
        password_hash=password_hash,
        permissions=config.registration_permissions(),
    )
    logger.info("user_registered zid=%s permissions=%s", user_row["zid"], user_row["permissions"])

    return schemas.AuthResponse(user=_to_user_response(user_row), token=_issue_token(user_row))


async def login(collection: AsyncCollection, payload: schemas.LoginRequest) -> schemas.AuthResponse:
    user_row = await repository.get_user_by_zid(collection, payload.zid)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid zID or password.",
        )

    if not bool(user_row.get("is_active", False)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive.",
        )

    is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid zID or password.",
        )

    return schemas.AuthResponse(user=_to_user_response(user_row), token=_issue_token(user_row))


async def get_user_from_access_token(collection: AsyncCollection, access_token: str) -> dict:
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token subject.",
        )

    user_row = await repository.get_user_by_id(collection, subject)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    if not bool(user_row.get("is_active", False)):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is inactive.",
        )
    return user_row


def ensure_can_write(user_row: dict) -> dict:
    permissions = str(user_row.get("permissions") or "").strip().lower()
    if permissions not in WRITE_PERMISSIONS:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is not allowed to change content.",
        )
    return user_row


def me(user_row: dict) -> schemas.UserResponse:
    return _to_user_response(user_row)
