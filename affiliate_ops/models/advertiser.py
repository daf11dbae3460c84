"""
Advertiser model.

An advertiser (merchant/offer owner) listed on a platform.
"""

from decimal import Decimal

from sqlalchemy import String, Numeric, Text, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import AdvertiserStatus


class Advertiser(EntityMixin, Base):
    __tablename__ = "advertisers"

    platform_id: Mapped[str] = mapped_column(
        ForeignKey("platforms.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    contact_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    commission_rate: Mapped[Decimal | None] = mapped_column(
        Numeric(7, 4), nullable=True
    )
    payment_terms: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[AdvertiserStatus] = mapped_column(
        SAEnum(
            AdvertiserStatus,
            name="advertiser_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AdvertiserStatus.ACTIVE,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Advertiser {self.name} ({self.status.value})>"
