"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    zid: str = Field(..., min_length=2, max_length=64)
    first_name: str = Field(default="", max_length=200)
    password: str = Field(..., min_length=8, max_length=128)


class LoginRequest(BaseModel):
    zid: str = Field(..., min_length=2, max_length=64)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    id: str
    zid: str
    first_name: str
    permissions: str
    is_active: bool
    created_on: int


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class AuthResponse(BaseModel):
    user: UserResponse
    token: TokenResponse
