"""
Pydantic schemas for websites.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import WebsiteStatus


class WebsiteBase(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    url: str = Field(min_length=1, max_length=255)
    website_type: str | None = Field(default=None, max_length=100)
    hosting_provider: str | None = Field(default=None, max_length=100)
    cpanel_url: str | None = Field(default=None, max_length=255)
    cpanel_username: str | None = Field(default=None, max_length=100)
    cpanel_password: str | None = Field(default=None, max_length=255)
    webmail_email: str | None = Field(default=None, max_length=255)
    webmail_password: str | None = Field(default=None, max_length=255)
    identity_id: str | None = None
    status: WebsiteStatus = WebsiteStatus.ACTIVE
    notes: str | None = None


class WebsiteCreate(WebsiteBase):
    pass


class WebsiteUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    url: str | None = Field(default=None, min_length=1, max_length=255)
    website_type: str | None = Field(default=None, max_length=100)
    hosting_provider: str | None = Field(default=None, max_length=100)
    cpanel_url: str | None = Field(default=None, max_length=255)
    cpanel_username: str | None = Field(default=None, max_length=100)
    cpanel_password: str | None = Field(default=None, max_length=255)
    webmail_email: str | None = Field(default=None, max_length=255)
    webmail_password: str | None = Field(default=None, max_length=255)
    identity_id: str | None = None
    status: WebsiteStatus | None = None
    notes: str | None = None


class WebsiteResponse(WebsiteBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
