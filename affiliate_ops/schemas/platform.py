"""
Pydantic schemas for platforms.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class PlatformCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    slug: str = Field(min_length=1, max_length=100, pattern=r"^[a-z0-9-]+$")
    website_url: str = Field(min_length=1, max_length=255)
    logo_url: str | None = Field(default=None, max_length=255)
    description: str | None = None


class PlatformResponse(BaseModel):
    id: str
    name: str
    slug: str
    website_url: str
    logo_url: str | None
    description: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
