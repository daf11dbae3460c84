"""
Identity model.

An identity is a persona: the person whose details are used
to register platform accounts, hold cards and own websites.
"""

from datetime import date

from sqlalchemy import String, Date, Text, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from affiliate_ops.models.base import Base, EntityMixin
from affiliate_ops.models.enums import IdentityStatus, Gender, IDType


class Identity(EntityMixin, Base):
    __tablename__ = "identities"

    # Personal details
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    gender: Mapped[Gender | None] = mapped_column(
        SAEnum(Gender, name="gender_enum"), nullable=True
    )
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    # Location
    street_address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)

    # Tech & docs
    id_type: Mapped[IDType | None] = mapped_column(
        SAEnum(IDType, name="id_type_enum"), nullable=True
    )
    id_expiry: Mapped[date | None] = mapped_column(Date, nullable=True)
    proxy_ip: Mapped[str | None] = mapped_column(String(100), nullable=True)
    browser_profile: Mapped[str | None] = mapped_column(String(100), nullable=True)

    status: Mapped[IdentityStatus] = mapped_column(
        SAEnum(
            IdentityStatus,
            name="identity_status_enum",
            create_constraint=True,
        ),
        nullable=False,
        default=IdentityStatus.ACTIVE,
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Identity {self.name} ({self.status.value})>"
