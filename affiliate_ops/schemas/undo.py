"""
Pydantic schemas for the undo history.

An ActionRecord describes one completed mutation and carries
the snapshots needed to reverse it. Snapshots are JSON-mode
dumps of the entity's response schema.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from affiliate_ops.models.enums import ActionType, EntityType


Snapshot = dict[str, Any]


class ActionEntry(BaseModel):
    """
    What the caller hands to the recorder.

    The recorder assigns id and created_at itself. Which
    snapshots must be present depends on the action:
    create needs new_data, delete needs previous_data,
    update needs both.
    """
    user_id: str = ""
    action: ActionType
    entity_type: EntityType
    entity_id: str = Field(min_length=1)
    entity_name: str
    previous_data: Snapshot | None = None
    new_data: Snapshot | None = None

    @model_validator(mode="after")
    def snapshots_match_action(self) -> "ActionEntry":
        if self.action == ActionType.CREATE:
            if self.new_data is None or self.previous_data is not None:
                raise ValueError("create actions carry new_data only")
        elif self.action == ActionType.DELETE:
            if self.previous_data is None or self.new_data is not None:
                raise ValueError("delete actions carry previous_data only")
        elif self.previous_data is None or self.new_data is None:
            raise ValueError("update actions carry previous_data and new_data")
        return self


class ActionRecord(ActionEntry):
    id: str
    created_at: datetime
    reverted_at: datetime | None = None

    @property
    def is_reverted(self) -> bool:
        return self.reverted_at is not None


class RevertResponse(BaseModel):
    """Outcome of an undo request, as returned by the API."""
    status: str
    record: ActionRecord | None = None
    error: str | None = None
