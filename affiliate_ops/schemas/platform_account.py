"""
Pydantic schemas for platform accounts.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import AccountStatus


class PlatformAccountBase(BaseModel):
    platform_id: str
    identity_id: str | None = None
    account_name: str = Field(min_length=1, max_length=200)
    account_email: str = Field(min_length=3, max_length=255)
    encrypted_password: str | None = Field(default=None, max_length=255)
    affiliate_id: str | None = Field(default=None, max_length=100)
    status: AccountStatus = AccountStatus.PENDING
    notes: str | None = None


class PlatformAccountCreate(PlatformAccountBase):
    pass


class PlatformAccountUpdate(BaseModel):
    platform_id: str | None = None
    identity_id: str | None = None
    account_name: str | None = Field(default=None, min_length=1, max_length=200)
    account_email: str | None = Field(default=None, min_length=3, max_length=255)
    encrypted_password: str | None = Field(default=None, max_length=255)
    affiliate_id: str | None = Field(default=None, max_length=100)
    status: AccountStatus | None = None
    notes: str | None = None


class PlatformAccountResponse(PlatformAccountBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
