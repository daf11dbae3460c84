"""
Master data services — identities, websites and cards.

Identities are the root of the master data: websites may
and cards must point at one.
"""

from sqlalchemy import select

from affiliate_ops.models.identity import Identity
from affiliate_ops.models.website import Website
from affiliate_ops.models.card import Card
from affiliate_ops.models.platform_account import PlatformAccount
from affiliate_ops.services.base import CrudService


class IdentityService(CrudService):
    model = Identity
    label = "Identity"
    search_fields = ("name", "email", "country")
    referenced_by = (
        (Website, "identity_id"),
        (Card, "identity_id"),
        (PlatformAccount, "identity_id"),
    )


class WebsiteService(CrudService):
    model = Website
    label = "Website"
    search_fields = ("name", "url", "hosting_provider")

    def check_references(self, data: dict) -> None:
        self._require(Identity, data.get("identity_id"), "Identity")


class CardService(CrudService):
    model = Card
    label = "Card"
    search_fields = ("card_holder", "last_four")

    def check_references(self, data: dict) -> None:
        self._require(Identity, data.get("identity_id"), "Identity")

    def list_by_identity(self, identity_id: str) -> list[Card]:
        cards = self.db.execute(
            select(Card)
            .where(Card.identity_id == identity_id)
            .order_by(Card.created_at.desc())
        ).scalars().all()
        return list(cards)
