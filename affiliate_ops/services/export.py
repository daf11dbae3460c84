"""
CSV export of the asset lists.

Each collection has a fixed column layout with readable
headers. Secrets (cPanel/webmail/account passwords) are
never exported.
"""

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from affiliate_ops.models.enums import EntityType


def _card_expiry(card) -> str:
    return f"{card.expiry_month:02d}/{card.expiry_year}"


# (attribute or None, header, optional transform(row))
EXPORT_COLUMNS = {
    EntityType.IDENTITY: ("identities", [
        ("name", "Name", None),
        ("email", "Email", None),
        ("phone", "Phone", None),
        ("country", "Country", None),
        ("city", "City", None),
        ("status", "Status", None),
        ("notes", "Notes", None),
        ("created_at", "Created At", None),
    ]),
    EntityType.WEBSITE: ("websites", [
        ("name", "Name", None),
        ("url", "URL", None),
        ("website_type", "Type", None),
        ("hosting_provider", "Hosting Provider", None),
        ("status", "Status", None),
        ("notes", "Notes", None),
        ("created_at", "Created At", None),
    ]),
    EntityType.CARD: ("cards", [
        ("card_holder", "Card Holder", None),
        ("card_type", "Card Type", None),
        ("last_four", "Last Four", None),
        (None, "Expiry", _card_expiry),
        ("billing_address", "Billing Address", None),
        ("status", "Status", None),
        ("notes", "Notes", None),
        ("created_at", "Created At", None),
    ]),
    EntityType.ADVERTISER: ("advertisers", [
        ("name", "Name", None),
        ("contact_name", "Contact Name", None),
        ("contact_email", "Contact Email", None),
        ("commission_rate", "Commission Rate", None),
        ("payment_terms", "Payment Terms", None),
        ("status", "Status", None),
        ("notes", "Notes", None),
    ]),
    EntityType.ACCOUNT: ("accounts", [
        ("account_name", "Account Name", None),
        ("account_email", "Email", None),
        ("affiliate_id", "Affiliate ID", None),
        ("status", "Status", None),
        ("notes", "Notes", None),
        ("created_at", "Created At", None),
    ]),
    EntityType.ORDER: ("orders", [
        ("order_number", "Order Number", None),
        ("product_name", "Product", None),
        ("amount", "Amount", None),
        ("currency", "Currency", None),
        ("commission", "Commission", None),
        ("status", "Status", None),
        ("order_date", "Order Date", None),
        ("refund_reminder_date", "Refund Reminder", None),
        ("notes", "Notes", None),
    ]),
}


def _format(value) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return f"{value:f}"
    return str(value)


def export_filename(entity_type: EntityType) -> str:
    base, _ = EXPORT_COLUMNS[entity_type]
    return f"{base}-{date.today().isoformat()}.csv"


def to_csv(entity_type: EntityType, rows: list) -> str:
    """Render rows of one collection as CSV text with a header line."""
    _, columns = EXPORT_COLUMNS[entity_type]
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow([header for _, header, _ in columns])
    for row in rows:
        writer.writerow([
            transform(row) if transform else _format(getattr(row, attr))
            for attr, _, transform in columns
        ])
    return buffer.getvalue()
