"""
Pydantic schemas for the dashboard overview.
"""

from decimal import Decimal

from pydantic import BaseModel


class CollectionCount(BaseModel):
    total: int
    active: int


class OverviewResponse(BaseModel):
    """
    Headline numbers for the dashboard landing page.

    Revenue and commission only count completed orders and
    are summed across currencies as stored.
    """
    identities: CollectionCount
    websites: CollectionCount
    cards: CollectionCount
    advertisers: CollectionCount
    accounts: CollectionCount
    orders_total: int
    orders_pending: int
    total_revenue: Decimal
    total_commission: Decimal
    refund_reminders: int
    burned_identities: int
