"""
Pydantic schemas for advertisers.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import AdvertiserStatus


class AdvertiserBase(BaseModel):
    platform_id: str
    name: str = Field(min_length=1, max_length=200)
    contact_email: str | None = Field(default=None, max_length=255)
    contact_name: str | None = Field(default=None, max_length=200)
    # Percentage, e.g. 7.5 for 7.5%
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100)
    payment_terms: str | None = Field(default=None, max_length=255)
    status: AdvertiserStatus = AdvertiserStatus.ACTIVE
    notes: str | None = None


class AdvertiserCreate(AdvertiserBase):
    pass


class AdvertiserUpdate(BaseModel):
    platform_id: str | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    contact_email: str | None = Field(default=None, max_length=255)
    contact_name: str | None = Field(default=None, max_length=200)
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100)
    payment_terms: str | None = Field(default=None, max_length=255)
    status: AdvertiserStatus | None = None
    notes: str | None = None


class AdvertiserResponse(AdvertiserBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
