"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from affiliate_ops.models.base import Base
from affiliate_ops.models.enums import (
    ActionType,
    EntityType,
    IdentityStatus,
    WebsiteStatus,
    CardStatus,
    AdvertiserStatus,
    AccountStatus,
    OrderStatus,
)
from affiliate_ops.models.platform import Platform
from affiliate_ops.models.identity import Identity
from affiliate_ops.models.website import Website
from affiliate_ops.models.card import Card
from affiliate_ops.models.advertiser import Advertiser
from affiliate_ops.models.platform_account import PlatformAccount
from affiliate_ops.models.order import Order

__all__ = [
    "Base",
    "ActionType",
    "EntityType",
    "IdentityStatus",
    "WebsiteStatus",
    "CardStatus",
    "AdvertiserStatus",
    "AccountStatus",
    "OrderStatus",
    "Platform",
    "Identity",
    "Website",
    "Card",
    "Advertiser",
    "PlatformAccount",
    "Order",
]
