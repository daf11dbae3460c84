"""
Order model.

An order placed through a platform account, with the
commission it is expected to earn. refund_reminder_date
is when the operator should check on a refund.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, Text, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import OrderStatus


class Order(EntityMixin, Base):
    __tablename__ = "orders"

    platform_id: Mapped[str] = mapped_column(
        ForeignKey("platforms.id"), nullable=False, index=True
    )
    account_id: Mapped[str | None] = mapped_column(
        ForeignKey("platform_accounts.id"), nullable=True, index=True
    )
    advertiser_id: Mapped[str | None] = mapped_column(
        ForeignKey("advertisers.id"), nullable=True, index=True
    )
    order_number: Mapped[str] = mapped_column(String(100), nullable=False)
    product_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(19, 4), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    commission: Mapped[Decimal | None] = mapped_column(
        Numeric(19, 4), nullable=True
    )
    status: Mapped[OrderStatus] = mapped_column(
        SAEnum(OrderStatus, name="order_status_enum", create_constraint=True),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    refund_reminder_date: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Order {self.order_number} "
            f"{self.amount} {self.currency} ({self.status.value})>"
        )
