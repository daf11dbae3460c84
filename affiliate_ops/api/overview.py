"""
Dashboard overview endpoint.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from affiliate_ops.models.base import get_db
from affiliate_ops.schemas.overview import OverviewResponse
from affiliate_ops.services.overview_service import OverviewService

router = APIRouter(tags=["Overview"])


@router.get("/overview", response_model=OverviewResponse)
def get_overview(db: Session = Depends(get_db)):
    """Counts per collection, completed-order totals and refund reminders."""
    return OverviewService(db).summary()
