"""
Tests for the entity store services.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from affiliate_ops.models.enums import (
    CardType,
    IdentityStatus,
    OrderStatus,
)
from affiliate_ops.schemas.advertiser import AdvertiserCreate
from affiliate_ops.schemas.card import CardCreate
from affiliate_ops.schemas.identity import IdentityUpdate
from affiliate_ops.schemas.order import OrderCreate, OrderUpdate
from affiliate_ops.schemas.platform import PlatformCreate
from affiliate_ops.schemas.platform_account import PlatformAccountCreate
from affiliate_ops.services.master_data import IdentityService, CardService
from affiliate_ops.services.platform_data import (
    AdvertiserService,
    PlatformAccountService,
    OrderService,
)
from affiliate_ops.services.platform_service import PlatformService
from tests.helpers import make_card, make_identity, make_order, make_platform


class TestPlatformService:

    def test_duplicate_slug_rejected(self, db_session, platform):
        service = PlatformService(db_session)
        with pytest.raises(ValueError, match="already exists"):
            service.create_platform(PlatformCreate(
                name="Other", slug=platform.slug, website_url="https://x.test",
            ))

    def test_list_is_alphabetical(self, db_session):
        make_platform(db_session, slug="shareasale")
        make_platform(db_session, slug="awin")

        names = [p.slug for p in PlatformService(db_session).list_platforms()]
        assert names == ["awin", "shareasale"]

    def test_get_by_slug(self, db_session, platform):
        found = PlatformService(db_session).get_by_slug("clickbank")
        assert found.id == platform.id


class TestIdentityService:

    def test_create_sets_defaults(self, identity):
        assert identity.id is not None
        assert identity.status == IdentityStatus.ACTIVE
        assert identity.created_by == "user-1"

    def test_update_applies_only_sent_fields(self, db_session, identity):
        service = IdentityService(db_session)
        updated = service.update(identity.id, IdentityUpdate(phone="555-0100"))
        db_session.commit()

        assert updated.phone == "555-0100"
        assert updated.city == "Austin"

    def test_update_missing_returns_none(self, db_session):
        service = IdentityService(db_session)
        assert service.update("nope", IdentityUpdate(notes="x")) is None

    def test_update_cannot_clear_required_field(self, db_session, identity):
        service = IdentityService(db_session)
        with pytest.raises(ValueError, match="name cannot be empty"):
            service.update(identity.id, IdentityUpdate(name=None))

    def test_delete(self, db_session, identity):
        service = IdentityService(db_session)
        assert service.delete(identity.id) is True
        db_session.commit()
        assert service.get(identity.id) is None
        assert service.delete(identity.id) is False

    def test_list_filters_by_status_and_search(self, db_session):
        make_identity(db_session, name="Jane Doe", email="jane@example.com")
        john = make_identity(db_session, name="John Roe", email="john@example.com")
        IdentityService(db_session).update(
            john.id, IdentityUpdate(status=IdentityStatus.BURNED)
        )
        db_session.commit()

        service = IdentityService(db_session)
        assert [i.name for i in service.list(status=IdentityStatus.BURNED)] == [
            "John Roe"
        ]
        assert [i.name for i in service.list(search="JANE")] == ["Jane Doe"]
        assert len(service.list()) == 2

    def test_delete_rejected_while_card_points_at_it(self, db_session, identity):
        card = make_card(db_session, identity.id)
        service = IdentityService(db_session)

        with pytest.raises(ValueError, match=f"Identity {identity.id} is still referenced"):
            service.delete(identity.id)

        db_session.rollback()
        assert service.get(identity.id) is not None
        assert CardService(db_session).get(card.id).identity_id == identity.id

    def test_delete_allowed_once_card_is_gone(self, db_session, identity):
        card = make_card(db_session, identity.id)
        CardService(db_session).delete(card.id)
        db_session.commit()

        assert IdentityService(db_session).delete(identity.id) is True

    def test_get_or_raise(self, db_session):
        with pytest.raises(ValueError, match="Identity missing not found"):
            IdentityService(db_session).get_or_raise("missing")


class TestCardService:

    def test_card_requires_existing_identity(self, db_session):
        with pytest.raises(ValueError, match="Identity ghost not found"):
            CardService(db_session).create(CardCreate(
                identity_id="ghost",
                card_type=CardType.DEBIT,
                last_four="1111",
                expiry_month=1,
                expiry_year=2030,
                card_holder="Nobody",
            ))

    def test_list_by_identity(self, db_session, identity):
        other = make_identity(db_session, name="John Roe", email="john@example.com")
        make_card(db_session, identity.id, last_four="1111")
        make_card(db_session, identity.id, last_four="2222")
        make_card(db_session, other.id, last_four="3333")

        cards = CardService(db_session).list_by_identity(identity.id)
        assert sorted(c.last_four for c in cards) == ["1111", "2222"]

    def test_masked_number(self, db_session, identity):
        card = make_card(db_session, identity.id, last_four="9876")
        assert card.masked_number == "****9876"


class TestOrderService:

    def test_order_requires_existing_platform(self, db_session):
        with pytest.raises(ValueError, match="Platform nowhere not found"):
            OrderService(db_session).create(OrderCreate(
                platform_id="nowhere",
                order_number="A1",
                amount=Decimal("10"),
                order_date=datetime(2026, 1, 1),
            ))

    def test_order_rejects_unknown_account(self, db_session, platform):
        order = make_order(db_session, platform.id)
        with pytest.raises(ValueError, match="Account acc-x not found"):
            OrderService(db_session).update(
                order.id, OrderUpdate(account_id="acc-x")
            )

    def test_list_is_ordered_by_order_date(self, db_session, platform):
        service = OrderService(db_session)
        for number, day in (("A", 3), ("B", 1), ("C", 2)):
            service.create(OrderCreate(
                platform_id=platform.id,
                order_number=number,
                amount=Decimal("5"),
                order_date=datetime(2026, 5, day),
            ))
        db_session.commit()

        assert [o.order_number for o in service.list()] == ["A", "C", "B"]

    def test_create_with_explicit_id(self, db_session, platform):
        order = make_order(db_session, platform.id, entity_id="o9")
        assert order.id == "o9"
        assert order.status == OrderStatus.PENDING

    def test_duplicate_explicit_id_rejected(self, db_session, platform):
        make_order(db_session, platform.id, entity_id="o9")
        with pytest.raises(ValueError, match="Order o9 already exists"):
            make_order(db_session, platform.id, entity_id="o9")

    def test_account_and_advertiser_kept_while_orders_point_at_them(
        self, db_session, platform
    ):
        account = PlatformAccountService(db_session).create(PlatformAccountCreate(
            platform_id=platform.id,
            account_name="jane-cb",
            account_email="jane@example.com",
        ))
        advertiser = AdvertiserService(db_session).create(AdvertiserCreate(
            platform_id=platform.id, name="Acme",
        ))
        db_session.commit()
        order = make_order(db_session, platform.id)
        OrderService(db_session).update(order.id, OrderUpdate(
            account_id=account.id, advertiser_id=advertiser.id,
        ))
        db_session.commit()

        with pytest.raises(ValueError, match="Account .* is still referenced"):
            PlatformAccountService(db_session).delete(account.id)
        with pytest.raises(ValueError, match="Advertiser .* is still referenced"):
            AdvertiserService(db_session).delete(advertiser.id)

        OrderService(db_session).delete(order.id)
        db_session.commit()
        assert PlatformAccountService(db_session).delete(account.id) is True
        assert AdvertiserService(db_session).delete(advertiser.id) is True
