"""
Website model.

A website used as a checkout or landing page, with the
hosting and mailbox credentials needed to operate it.
"""

from sqlalchemy import String, Text, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import WebsiteStatus


class Website(EntityMixin, Base):
    __tablename__ = "websites"

    # Basic info
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(String(255), nullable=False)
    website_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    hosting_provider: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Credentials
    cpanel_url: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cpanel_username: Mapped[str | None] = mapped_column(String(100), nullable=True)
    cpanel_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    webmail_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    webmail_password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    identity_id: Mapped[str | None] = mapped_column(
        ForeignKey("identities.id"), nullable=True, index=True
    )
    status: Mapped[WebsiteStatus] = mapped_column(
        SAEnum(
            WebsiteStatus,
            name="website_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=WebsiteStatus.ACTIVE,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Website {self.url} ({self.status.value})>"
