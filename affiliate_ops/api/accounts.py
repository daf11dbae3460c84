"""
Account API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, AccountStatus
from affiliate_ops.schemas.platform_account import (
    PlatformAccountCreate,
    PlatformAccountUpdate,
    PlatformAccountResponse,
)
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.platform_data import PlatformAccountService

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", response_model=list[PlatformAccountResponse])
def list_accounts(
    status: AccountStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List accounts, newest first. q searches account name, email and affiliate id."""
    return PlatformAccountService(db).list(status=status, search=q)


@router.get("/export")
def export_accounts(
    status: AccountStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = PlatformAccountService(db).list(status=status, search=q)
    filename = export_filename(EntityType.ACCOUNT)
    return Response(
        content=to_csv(EntityType.ACCOUNT, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{account_id}", response_model=PlatformAccountResponse)
def get_account(
    account_id: str,
    db: Session = Depends(get_db),
):
    try:
        return PlatformAccountService(db).get_or_raise(account_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=PlatformAccountResponse, status_code=201)
def create_account(
    request: PlatformAccountCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = PlatformAccountService(db)
    try:
        account = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.ACCOUNT, account)
    return account


@router.patch("/{account_id}", response_model=PlatformAccountResponse)
def update_account(
    account_id: str,
    request: PlatformAccountUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = PlatformAccountService(db)
    try:
        account = service.get_or_raise(account_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ACCOUNT, account)
    try:
        account = service.update(account_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.ACCOUNT, before, account
    )
    return account


@router.delete("/{account_id}", status_code=204)
def delete_account(
    account_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = PlatformAccountService(db)
    try:
        account = service.get_or_raise(account_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ACCOUNT, account)
    name = history.entity_label(EntityType.ACCOUNT, account)
    try:
        service.delete(account_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Account {account_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.ACCOUNT, before, name)
    return Response(status_code=204)
