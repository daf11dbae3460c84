"""
Undo service — reverts a recorded action.

Ordering is fixed: the record is marked reverted first, then
the inverse mutation is applied. If the apply step fails the
mark stays in place and the failure is reported; the data
change is rolled back but the history is not. Nothing is
retried.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from affiliate_ops.schemas.undo import ActionRecord
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.revert_dispatch import apply_inverse

logger = logging.getLogger(__name__)

REVERTED = "reverted"
NOT_REVERTIBLE = "not_revertible"
APPLY_FAILED = "apply_failed"


@dataclass
class RevertResult:
    status: str
    record: ActionRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == REVERTED


class UndoService:

    def __init__(self, db: Session, action_log: ActionLog):
        self.db = db
        self.action_log = action_log

    def undo(self, record_id: str) -> RevertResult:
        """
        Revert one action and restore the data it changed.

        Commits on success. Expected failures come back as a
        RevertResult, not as exceptions.
        """
        record = self.action_log.revert(record_id)
        if record is None:
            return RevertResult(
                status=NOT_REVERTIBLE,
                error="Failed to revert action",
            )

        try:
            apply_inverse(self.db, record)
            self.db.commit()
        except (ValueError, SQLAlchemyError) as e:
            self.db.rollback()
            logger.warning(
                "Action %s marked reverted but inverse %s of %s %s failed: %s",
                record.id, record.action.value,
                record.entity_type.value, record.entity_id, e,
            )
            return RevertResult(status=APPLY_FAILED, record=record, error=str(e))

        return RevertResult(status=REVERTED, record=record)
