"""
Tests for CSV export.
"""

import csv
import io

from affiliate_ops.models.enums import EntityType
from affiliate_ops.services.export import to_csv, export_filename
from tests.helpers import make_card, make_order


def parse(text):
    return list(csv.reader(io.StringIO(text)))


def test_card_export_formats_expiry(db_session, identity):
    card = make_card(db_session, identity.id, last_four="4242")

    rows = parse(to_csv(EntityType.CARD, [card]))

    assert rows[0][:4] == ["Card Holder", "Card Type", "Last Four", "Expiry"]
    assert rows[1][:4] == ["Jane Doe", "Virtual", "4242", "03/2029"]


def test_order_export_uses_plain_values(db_session, platform):
    order = make_order(db_session, platform.id)

    header, row = parse(to_csv(EntityType.ORDER, [order]))

    assert row[header.index("Amount")] == "99.5000"
    assert row[header.index("Status")] == "Pending"
    assert row[header.index("Refund Reminder")] == ""


def test_website_export_leaves_out_credentials():
    header = parse(to_csv(EntityType.WEBSITE, []))[0]
    assert not any("Password" in column for column in header)


def test_export_filename():
    assert export_filename(EntityType.ACCOUNT).startswith("accounts-")
    assert export_filename(EntityType.ACCOUNT).endswith(".csv")
