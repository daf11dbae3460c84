"""
Platform API endpoints.

Platforms are reference data and are not tracked in the
undo history.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from affiliate_ops.models.base import get_db
from affiliate_ops.services.platform_service import PlatformService
from affiliate_ops.schemas.platform import PlatformCreate, PlatformResponse

router = APIRouter(prefix="/platforms", tags=["Platforms"])


@router.get("", response_model=list[PlatformResponse])
def list_platforms(db: Session = Depends(get_db)):
    """All platforms, alphabetically."""
    return PlatformService(db).list_platforms()


@router.post("", response_model=PlatformResponse, status_code=201)
def create_platform(
    request: PlatformCreate,
    db: Session = Depends(get_db),
):
    service = PlatformService(db)
    try:
        platform = service.create_platform(request)
        db.commit()
        return platform
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/slug/{slug}", response_model=PlatformResponse)
def get_platform_by_slug(
    slug: str,
    db: Session = Depends(get_db),
):
    try:
        return PlatformService(db).get_by_slug(slug)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{platform_id}", response_model=PlatformResponse)
def get_platform(
    platform_id: str,
    db: Session = Depends(get_db),
):
    try:
        return PlatformService(db).get_platform(platform_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
