"""
Platform account model.

A login on an affiliate platform, optionally tied to the
identity it was registered with.
"""

from sqlalchemy import String, Text, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import AccountStatus


class PlatformAccount(EntityMixin, Base):
    __tablename__ = "platform_accounts"

    platform_id: Mapped[str] = mapped_column(
        ForeignKey("platforms.id"), nullable=False, index=True
    )
    identity_id: Mapped[str | None] = mapped_column(
        ForeignKey("identities.id"), nullable=True, index=True
    )
    account_name: Mapped[str] = mapped_column(String(200), nullable=False)
    account_email: Mapped[str] = mapped_column(String(255), nullable=False)
    encrypted_password: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    affiliate_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[AccountStatus] = mapped_column(
        SAEnum(
            AccountStatus,
            name="account_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=AccountStatus.PENDING,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PlatformAccount {self.account_name} ({self.status.value})>"
