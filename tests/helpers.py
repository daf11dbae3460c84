"""
Test data builders shared by service and API tests.

Each helper commits, so the row exists before the test
records or reverts anything against it.
"""

from datetime import datetime
from decimal import Decimal

from affiliate_ops.models.enums import CardType
from affiliate_ops.schemas.platform import PlatformCreate
from affiliate_ops.schemas.identity import IdentityCreate
from affiliate_ops.schemas.card import CardCreate
from affiliate_ops.schemas.order import OrderCreate
from affiliate_ops.services.platform_service import PlatformService
from affiliate_ops.services.master_data import IdentityService, CardService
from affiliate_ops.services.platform_data import OrderService


def make_platform(db_session, slug="clickbank"):
    platform = PlatformService(db_session).create_platform(PlatformCreate(
        name=slug.title(),
        slug=slug,
        website_url=f"https://{slug}.example.com",
    ))
    db_session.commit()
    return platform


def make_identity(db_session, name="Jane Doe", email="jane@example.com"):
    identity = IdentityService(db_session).create(IdentityCreate(
        name=name,
        email=email,
        country="US",
        city="Austin",
    ), created_by="user-1")
    db_session.commit()
    return identity


def make_card(db_session, identity_id, last_four="4242"):
    card = CardService(db_session).create(CardCreate(
        identity_id=identity_id,
        card_type=CardType.VIRTUAL,
        last_four=last_four,
        expiry_month=3,
        expiry_year=2029,
        card_holder="Jane Doe",
    ))
    db_session.commit()
    return card


def make_order(db_session, platform_id, order_number="X1", entity_id=None):
    order = OrderService(db_session).create(OrderCreate(
        platform_id=platform_id,
        order_number=order_number,
        product_name="Blender",
        amount=Decimal("99.5000"),
        order_date=datetime(2026, 10, 1, 12, 0),
    ), entity_id=entity_id)
    db_session.commit()
    return order
