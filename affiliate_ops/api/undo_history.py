"""
Undo history API endpoints.

The presentation layer lists what can be undone and asks
for a revert by record id. Reverting marks the record first
and then applies the inverse change to the data; see
UndoService for what happens when the second step fails.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log
from affiliate_ops.models.base import get_db
from affiliate_ops.schemas.undo import ActionRecord, RevertResponse
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.undo_service import UndoService, NOT_REVERTIBLE

router = APIRouter(prefix="/undo-history", tags=["Undo History"])


@router.get("", response_model=list[ActionRecord])
def list_history(action_log: ActionLog = Depends(get_action_log)):
    """Actions that can still be undone, most recent first."""
    return action_log.list()


@router.post("/{record_id}/revert", response_model=RevertResponse)
def revert_action(
    record_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
):
    """
    Undo one action.

    404 if the action is unknown or already undone.
    409 if the action was marked undone but the data could
    not be restored. The action stays undone either way.
    """
    result = UndoService(db, action_log).undo(record_id)

    if result.status == NOT_REVERTIBLE:
        raise HTTPException(status_code=404, detail=result.error)
    if not result.ok:
        raise HTTPException(status_code=409, detail=result.error)

    return RevertResponse(status=result.status, record=result.record)


@router.delete("", status_code=204)
def clear_history(action_log: ActionLog = Depends(get_action_log)):
    action_log.clear()
    return Response(status_code=204)
