"""
Action log — the in-memory undo history.

The log holds the most recent mutations, newest first, and
is capped at a fixed size. It is deliberately not persisted:
it lives as long as the process (one ActionLog per app,
reachable through app.state and injected as a dependency).

Lifecycle of a record:
1. record(): appended once the mutation it describes is committed
2. revert(): marked reverted at most once, never unmarked
3. evicted: silently dropped when the log overflows its cap

The log never touches the database. Applying the inverse
mutation after a successful revert() is the caller's job
(see revert_dispatch).
"""

import logging
import threading
import uuid
from datetime import datetime

from affiliate_ops.schemas.undo import ActionEntry, ActionRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY = 100


class ActionLog:
    """
    Bounded, most-recent-first log of completed mutations.

    Routes run in a threadpool, so every operation that reads
    or changes the record list holds the lock. That is what
    makes two concurrent revert() calls on one id produce
    exactly one success.
    """

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY):
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self.max_history = max_history
        self._records: list[ActionRecord] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def record(self, entry: ActionEntry) -> str:
        """
        Add a completed mutation to the front of the log.

        Returns the generated record id. Snapshot contents are
        stored as given; the log does not inspect them.
        """
        record = ActionRecord(
            **entry.model_dump(),
            id=str(uuid.uuid4()),
            created_at=datetime.utcnow(),
        )

        with self._lock:
            self._records.insert(0, record)
            evicted = len(self._records) - self.max_history
            if evicted > 0:
                del self._records[self.max_history:]

        logger.debug(
            "Recorded %s %s %s",
            record.action.value, record.entity_type.value, record.entity_id,
        )
        if evicted > 0:
            logger.info("Undo history full, dropped %d oldest action(s)", evicted)
        return record.id

    def all(self) -> list[ActionRecord]:
        """Every retained record, reverted ones included."""
        with self._lock:
            return [r.model_copy(deep=True) for r in self._records]

    def list(self) -> list[ActionRecord]:
        """Records that can still be reverted, newest first."""
        with self._lock:
            return [
                r.model_copy(deep=True)
                for r in self._records
                if not r.is_reverted
            ]

    def get(self, record_id: str) -> ActionRecord | None:
        with self._lock:
            record = self._find(record_id)
            return record.model_copy(deep=True) if record else None

    def revert(self, record_id: str) -> ActionRecord | None:
        """
        Mark a record as reverted.

        Returns a copy of the record as it was before marking,
        or None if the id is unknown or was already reverted.
        A None result leaves the log untouched.
        """
        with self._lock:
            record = self._find(record_id)
            if record is None or record.is_reverted:
                return None

            found = record.model_copy(deep=True)
            record.reverted_at = datetime.utcnow()

        logger.info(
            "Marked action %s reverted (%s %s %s)",
            record_id, found.action.value,
            found.entity_type.value, found.entity_id,
        )
        return found

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _find(self, record_id: str) -> ActionRecord | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None
