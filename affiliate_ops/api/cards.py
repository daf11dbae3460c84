"""
Card API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, CardStatus
from affiliate_ops.schemas.card import (
    CardCreate,
    CardUpdate,
    CardResponse,
)
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.master_data import CardService

router = APIRouter(prefix="/cards", tags=["Cards"])


@router.get("", response_model=list[CardResponse])
def list_cards(
    status: CardStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List cards, newest first. q searches card holder and last four digits."""
    return CardService(db).list(status=status, search=q)


@router.get("/export")
def export_cards(
    status: CardStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = CardService(db).list(status=status, search=q)
    filename = export_filename(EntityType.CARD)
    return Response(
        content=to_csv(EntityType.CARD, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{card_id}", response_model=CardResponse)
def get_card(
    card_id: str,
    db: Session = Depends(get_db),
):
    try:
        return CardService(db).get_or_raise(card_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=CardResponse, status_code=201)
def create_card(
    request: CardCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = CardService(db)
    try:
        card = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.CARD, card)
    return card


@router.patch("/{card_id}", response_model=CardResponse)
def update_card(
    card_id: str,
    request: CardUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = CardService(db)
    try:
        card = service.get_or_raise(card_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.CARD, card)
    try:
        card = service.update(card_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.CARD, before, card
    )
    return card


@router.delete("/{card_id}", status_code=204)
def delete_card(
    card_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = CardService(db)
    try:
        card = service.get_or_raise(card_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.CARD, card)
    name = history.entity_label(EntityType.CARD, card)
    try:
        service.delete(card_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Card {card_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.CARD, before, name)
    return Response(status_code=204)
