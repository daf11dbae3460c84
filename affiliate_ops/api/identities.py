"""
Identity API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, IdentityStatus
from affiliate_ops.schemas.identity import (
    IdentityCreate,
    IdentityUpdate,
    IdentityResponse,
)
from affiliate_ops.schemas.card import CardResponse
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.master_data import IdentityService, CardService

router = APIRouter(prefix="/identities", tags=["Identities"])


@router.get("", response_model=list[IdentityResponse])
def list_identities(
    status: IdentityStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List identities, newest first. q searches name, email and country."""
    return IdentityService(db).list(status=status, search=q)


@router.get("/export")
def export_identities(
    status: IdentityStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = IdentityService(db).list(status=status, search=q)
    filename = export_filename(EntityType.IDENTITY)
    return Response(
        content=to_csv(EntityType.IDENTITY, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{identity_id}", response_model=IdentityResponse)
def get_identity(
    identity_id: str,
    db: Session = Depends(get_db),
):
    try:
        return IdentityService(db).get_or_raise(identity_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=IdentityResponse, status_code=201)
def create_identity(
    request: IdentityCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = IdentityService(db)
    try:
        identity = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.IDENTITY, identity)
    return identity


@router.patch("/{identity_id}", response_model=IdentityResponse)
def update_identity(
    identity_id: str,
    request: IdentityUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = IdentityService(db)
    try:
        identity = service.get_or_raise(identity_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.IDENTITY, identity)
    try:
        identity = service.update(identity_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.IDENTITY, before, identity
    )
    return identity


@router.delete("/{identity_id}", status_code=204)
def delete_identity(
    identity_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = IdentityService(db)
    try:
        identity = service.get_or_raise(identity_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.IDENTITY, identity)
    name = history.entity_label(EntityType.IDENTITY, identity)
    try:
        service.delete(identity_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Identity {identity_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.IDENTITY, before, name)
    return Response(status_code=204)


@router.get("/{identity_id}/cards", response_model=list[CardResponse])
def list_identity_cards(
    identity_id: str,
    db: Session = Depends(get_db),
):
    """Cards held by an identity, newest first."""
    try:
        IdentityService(db).get_or_raise(identity_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return CardService(db).list_by_identity(identity_id)
