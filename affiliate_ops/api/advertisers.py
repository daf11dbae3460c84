"""
Advertiser API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, AdvertiserStatus
from affiliate_ops.schemas.advertiser import (
    AdvertiserCreate,
    AdvertiserUpdate,
    AdvertiserResponse,
)
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.platform_data import AdvertiserService

router = APIRouter(prefix="/advertisers", tags=["Advertisers"])


@router.get("", response_model=list[AdvertiserResponse])
def list_advertisers(
    status: AdvertiserStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List advertisers, newest first. q searches name and contact details."""
    return AdvertiserService(db).list(status=status, search=q)


@router.get("/export")
def export_advertisers(
    status: AdvertiserStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = AdvertiserService(db).list(status=status, search=q)
    filename = export_filename(EntityType.ADVERTISER)
    return Response(
        content=to_csv(EntityType.ADVERTISER, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{advertiser_id}", response_model=AdvertiserResponse)
def get_advertiser(
    advertiser_id: str,
    db: Session = Depends(get_db),
):
    try:
        return AdvertiserService(db).get_or_raise(advertiser_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=AdvertiserResponse, status_code=201)
def create_advertiser(
    request: AdvertiserCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = AdvertiserService(db)
    try:
        advertiser = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.ADVERTISER, advertiser)
    return advertiser


@router.patch("/{advertiser_id}", response_model=AdvertiserResponse)
def update_advertiser(
    advertiser_id: str,
    request: AdvertiserUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = AdvertiserService(db)
    try:
        advertiser = service.get_or_raise(advertiser_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ADVERTISER, advertiser)
    try:
        advertiser = service.update(advertiser_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.ADVERTISER, before, advertiser
    )
    return advertiser


@router.delete("/{advertiser_id}", status_code=204)
def delete_advertiser(
    advertiser_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = AdvertiserService(db)
    try:
        advertiser = service.get_or_raise(advertiser_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ADVERTISER, advertiser)
    name = history.entity_label(EntityType.ADVERTISER, advertiser)
    try:
        service.delete(advertiser_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Advertiser {advertiser_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.ADVERTISER, before, name)
    return Response(status_code=204)
