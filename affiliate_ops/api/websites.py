"""
Website API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, WebsiteStatus
from affiliate_ops.schemas.website import (
    WebsiteCreate,
    WebsiteUpdate,
    WebsiteResponse,
)
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.master_data import WebsiteService

router = APIRouter(prefix="/websites", tags=["Websites"])


@router.get("", response_model=list[WebsiteResponse])
def list_websites(
    status: WebsiteStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List websites, newest first. q searches name, URL and hosting provider."""
    return WebsiteService(db).list(status=status, search=q)


@router.get("/export")
def export_websites(
    status: WebsiteStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = WebsiteService(db).list(status=status, search=q)
    filename = export_filename(EntityType.WEBSITE)
    return Response(
        content=to_csv(EntityType.WEBSITE, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{website_id}", response_model=WebsiteResponse)
def get_website(
    website_id: str,
    db: Session = Depends(get_db),
):
    try:
        return WebsiteService(db).get_or_raise(website_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=WebsiteResponse, status_code=201)
def create_website(
    request: WebsiteCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = WebsiteService(db)
    try:
        website = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.WEBSITE, website)
    return website


@router.patch("/{website_id}", response_model=WebsiteResponse)
def update_website(
    website_id: str,
    request: WebsiteUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = WebsiteService(db)
    try:
        website = service.get_or_raise(website_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.WEBSITE, website)
    try:
        website = service.update(website_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.WEBSITE, before, website
    )
    return website


@router.delete("/{website_id}", status_code=204)
def delete_website(
    website_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = WebsiteService(db)
    try:
        website = service.get_or_raise(website_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.WEBSITE, website)
    name = history.entity_label(EntityType.WEBSITE, website)
    try:
        service.delete(website_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Website {website_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.WEBSITE, before, name)
    return Response(status_code=204)
