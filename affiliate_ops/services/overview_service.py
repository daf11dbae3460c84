"""
Overview service — headline counts and totals for the dashboard.

Read-only: nothing here is recorded in the undo history.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from affiliate_ops.models.advertiser import Advertiser
from affiliate_ops.models.card import Card
from affiliate_ops.models.enums import (
    AccountStatus,
    AdvertiserStatus,
    CardStatus,
    IdentityStatus,
    OrderStatus,
    WebsiteStatus,
)
from affiliate_ops.models.identity import Identity
from affiliate_ops.models.order import Order
from affiliate_ops.models.platform_account import PlatformAccount
from affiliate_ops.models.website import Website
from affiliate_ops.schemas.overview import CollectionCount, OverviewResponse

# Reminders falling due within this window are flagged
REFUND_REMINDER_WINDOW = timedelta(days=7)


class OverviewService:

    def __init__(self, db: Session):
        self.db = db

    def _count(self, model, *conditions) -> int:
        query = select(func.count()).select_from(model)
        if conditions:
            query = query.where(*conditions)
        return self.db.execute(query).scalar()

    def _collection(self, model, active_status) -> CollectionCount:
        return CollectionCount(
            total=self._count(model),
            active=self._count(model, model.status == active_status),
        )

    def _completed_sum(self, column) -> Decimal:
        total = self.db.execute(
            select(func.coalesce(func.sum(column), 0)).where(
                Order.status == OrderStatus.COMPLETED,
            )
        ).scalar()
        return Decimal(str(total))

    def refund_reminders_due(self, now: datetime | None = None) -> int:
        """
        Orders whose refund reminder falls within the next
        seven days, or is already past, and that haven't been
        refunded yet.
        """
        now = now or datetime.utcnow()
        return self._count(
            Order,
            Order.refund_reminder_date.is_not(None),
            Order.refund_reminder_date <= now + REFUND_REMINDER_WINDOW,
            Order.status != OrderStatus.REFUNDED,
        )

    def summary(self, now: datetime | None = None) -> OverviewResponse:
        return OverviewResponse(
            identities=self._collection(Identity, IdentityStatus.ACTIVE),
            websites=self._collection(Website, WebsiteStatus.ACTIVE),
            cards=self._collection(Card, CardStatus.ACTIVE),
            advertisers=self._collection(Advertiser, AdvertiserStatus.ACTIVE),
            accounts=self._collection(PlatformAccount, AccountStatus.ACTIVE),
            orders_total=self._count(Order),
            orders_pending=self._count(
                Order, Order.status == OrderStatus.PENDING
            ),
            total_revenue=self._completed_sum(Order.amount),
            total_commission=self._completed_sum(Order.commission),
            refund_reminders=self.refund_reminders_due(now),
            burned_identities=self._count(
                Identity, Identity.status == IdentityStatus.BURNED
            ),
        )
