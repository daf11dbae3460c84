"""
Platform data services — advertisers, platform accounts
and orders. All three belong to a platform.
"""

from affiliate_ops.models.platform import Platform
from affiliate_ops.models.identity import Identity
from affiliate_ops.models.advertiser import Advertiser
from affiliate_ops.models.platform_account import PlatformAccount
from affiliate_ops.models.order import Order
from affiliate_ops.services.base import CrudService


class AdvertiserService(CrudService):
    model = Advertiser
    label = "Advertiser"
    search_fields = ("name", "contact_name", "contact_email")
    referenced_by = ((Order, "advertiser_id"),)

    def check_references(self, data: dict) -> None:
        self._require(Platform, data.get("platform_id"), "Platform")


class PlatformAccountService(CrudService):
    model = PlatformAccount
    label = "Account"
    search_fields = ("account_name", "account_email", "affiliate_id")
    referenced_by = ((Order, "account_id"),)

    def check_references(self, data: dict) -> None:
        self._require(Platform, data.get("platform_id"), "Platform")
        self._require(Identity, data.get("identity_id"), "Identity")


class OrderService(CrudService):
    model = Order
    label = "Order"
    search_fields = ("order_number", "product_name")
    order_by = "order_date"

    def check_references(self, data: dict) -> None:
        self._require(Platform, data.get("platform_id"), "Platform")
        self._require(PlatformAccount, data.get("account_id"), "Account")
        self._require(Advertiser, data.get("advertiser_id"), "Advertiser")
