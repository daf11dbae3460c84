"""
Payment card model.

Only the last four digits of a card are stored. Every card
belongs to an identity (the card holder persona).
"""

from sqlalchemy import String, Integer, Text, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import CardType, CardStatus


class Card(EntityMixin, Base):
    __tablename__ = "cards"

    identity_id: Mapped[str] = mapped_column(
        ForeignKey("identities.id"), nullable=False, index=True
    )
    card_type: Mapped[CardType] = mapped_column(
        SAEnum(CardType, name="card_type_enum", create_constraint=True),
        nullable=False,
    )
    last_four: Mapped[str] = mapped_column(String(4), nullable=False)
    expiry_month: Mapped[int] = mapped_column(Integer, nullable=False)
    expiry_year: Mapped[int] = mapped_column(Integer, nullable=False)
    card_holder: Mapped[str] = mapped_column(String(200), nullable=False)
    billing_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[CardStatus] = mapped_column(
        SAEnum(CardStatus, name="card_status_enum", create_constraint=True),
        nullable=False,
        default=CardStatus.ACTIVE,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    @property
    def masked_number(self) -> str:
        return f"****{self.last_four}"

    def __repr__(self) -> str:
        return f"<Card {self.masked_number} ({self.status.value})>"
