"""
Pydantic schemas for sponsor endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class Sponsor(BaseModel):
    id: str
    name: str = ""
    logo: str = ""
    tier: str = ""
    link: str = ""
    expiry: int = 0


class SponsorResponse(BaseModel):
    sponsor: Sponsor


class SponsorListResponse(BaseModel):
    sponsors: list[Sponsor]


class SponsorCreatedResponse(BaseModel):
    id: str
