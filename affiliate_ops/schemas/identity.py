"""
Pydantic schemas for identities.

IdentityResponse is also the snapshot shape stored in the
undo history.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import IdentityStatus, Gender, IDType


class IdentityBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    gender: Gender | None = None
    date_of_birth: date | None = None
    phone: str | None = Field(default=None, max_length=50)
    email: str = Field(min_length=3, max_length=255)
    street_address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)
    country: str = Field(min_length=1, max_length=100)
    id_type: IDType | None = None
    id_expiry: date | None = None
    proxy_ip: str | None = Field(default=None, max_length=100)
    browser_profile: str | None = Field(default=None, max_length=100)
    status: IdentityStatus = IdentityStatus.ACTIVE
    notes: str | None = None


class IdentityCreate(IdentityBase):
    pass


class IdentityUpdate(BaseModel):
    """Partial update: only the fields that were sent are applied."""
    name: str | None = Field(default=None, min_length=1, max_length=200)
    gender: Gender | None = None
    date_of_birth: date | None = None
    phone: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    street_address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)
    country: str | None = Field(default=None, min_length=1, max_length=100)
    id_type: IDType | None = None
    id_expiry: date | None = None
    proxy_ip: str | None = Field(default=None, max_length=100)
    browser_profile: str | None = Field(default=None, max_length=100)
    status: IdentityStatus | None = None
    notes: str | None = None


class IdentityResponse(IdentityBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
