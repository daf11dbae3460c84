"""
Pydantic schemas for payment cards.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import CardType, CardStatus


class CardBase(BaseModel):
    identity_id: str
    card_type: CardType
    last_four: str = Field(pattern=r"^\d{4}$")
    expiry_month: int = Field(ge=1, le=12)
    expiry_year: int = Field(ge=2000, le=2100)
    card_holder: str = Field(min_length=1, max_length=200)
    billing_address: str | None = Field(default=None, max_length=255)
    status: CardStatus = CardStatus.ACTIVE
    notes: str | None = None


class CardCreate(CardBase):
    pass


class CardUpdate(BaseModel):
    identity_id: str | None = None
    card_type: CardType | None = None
    last_four: str | None = Field(default=None, pattern=r"^\d{4}$")
    expiry_month: int | None = Field(default=None, ge=1, le=12)
    expiry_year: int | None = Field(default=None, ge=2000, le=2100)
    card_holder: str | None = Field(default=None, min_length=1, max_length=200)
    billing_address: str | None = Field(default=None, max_length=255)
    status: CardStatus | None = None
    notes: str | None = None


class CardResponse(CardBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
