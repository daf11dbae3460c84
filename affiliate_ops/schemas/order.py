"""
Pydantic schemas for orders.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from affiliate_ops.models.enums import OrderStatus


class OrderBase(BaseModel):
    platform_id: str
    account_id: str | None = None
    advertiser_id: str | None = None
    order_number: str = Field(min_length=1, max_length=100)
    product_name: str | None = Field(default=None, max_length=255)
    amount: Decimal = Field(ge=0, decimal_places=4)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    commission: Decimal | None = Field(default=None, ge=0, decimal_places=4)
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime
    refund_reminder_date: datetime | None = None
    notes: str | None = None


class OrderCreate(OrderBase):
    pass


class OrderUpdate(BaseModel):
    platform_id: str | None = None
    account_id: str | None = None
    advertiser_id: str | None = None
    order_number: str | None = Field(default=None, min_length=1, max_length=100)
    product_name: str | None = Field(default=None, max_length=255)
    amount: Decimal | None = Field(default=None, ge=0, decimal_places=4)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    commission: Decimal | None = Field(default=None, ge=0, decimal_places=4)
    status: OrderStatus | None = None
    order_date: datetime | None = None
    refund_reminder_date: datetime | None = None
    notes: str | None = None


class OrderResponse(OrderBase):
    id: str
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
