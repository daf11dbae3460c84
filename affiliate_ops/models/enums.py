"""
Shared enumerations for database models and the undo history.

Values are the labels shown in the dashboard; they are also
what ends up in JSON snapshots, so renaming a value breaks
revert of snapshots taken before the rename.
"""

import enum


class ActionType(str, enum.Enum):
    """Kind of mutation recorded in the undo history."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class EntityType(str, enum.Enum):
    """The six asset collections that support undo."""
    IDENTITY = "identity"
    WEBSITE = "website"
    CARD = "card"
    ADVERTISER = "advertiser"
    ACCOUNT = "account"
    ORDER = "order"


class IdentityStatus(str, enum.Enum):
    ACTIVE = "Active"
    BURNED = "Burned"
    PENDING_DOCS = "Pending Docs"


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class IDType(str, enum.Enum):
    PASSPORT = "Passport"
    DRIVING_LICENSE = "Driving License"
    NATIONAL_ID = "National ID"
    OTHER = "Other"


class WebsiteStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class CardType(str, enum.Enum):
    CREDIT = "Credit"
    DEBIT = "Debit"
    PREPAID = "Prepaid"
    VIRTUAL = "Virtual"


class CardStatus(str, enum.Enum):
    ACTIVE = "Active"
    EXPIRED = "Expired"
    BLOCKED = "Blocked"


class AdvertiserStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"


class AccountStatus(str, enum.Enum):
    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    PENDING = "Pending"


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    REFUNDED = "Refunded"
    CANCELLED = "Cancelled"
