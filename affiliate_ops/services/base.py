"""
Shared CRUD plumbing for the entity store.

Each tracked collection gets a small service class on top
of CrudService. The service flushes but never commits;
the caller controls the transaction boundary, and only
records an undo action after its commit succeeds.
"""

from datetime import datetime

from pydantic import BaseModel
from sqlalchemy import select, or_
from sqlalchemy.orm import Session

from affiliate_ops.models.base import Base


class CrudService:
    """
    create / update / delete / get / list for one model.

    Subclasses set the model, a human label for error
    messages, the columns used for text search, and
    override check_references() to validate foreign rows.
    referenced_by lists the (model, column) pairs that point
    at this model; a row they still point at cannot be deleted.
    """

    model: type[Base]
    label: str = "Entity"
    search_fields: tuple[str, ...] = ()
    order_by: str = "created_at"
    referenced_by: tuple[tuple[type[Base], str], ...] = ()

    def __init__(self, db: Session):
        self.db = db

    def check_references(self, data: dict) -> None:
        """Raise ValueError if data points at rows that don't exist."""

    def check_dependents(self, entity_id: str) -> None:
        """Raise ValueError if any row still points at entity_id."""
        for model, column in self.referenced_by:
            row = self.db.execute(
                select(model.id).where(getattr(model, column) == entity_id).limit(1)
            ).first()
            if row is not None:
                raise ValueError(f"{self.label} {entity_id} is still referenced")

    def _require(self, model: type[Base], entity_id: str | None, label: str) -> None:
        if entity_id is None:
            return
        if not self.db.get(model, entity_id):
            raise ValueError(f"{label} {entity_id} not found")

    def _check_not_null(self, changes: dict) -> None:
        columns = self.model.__table__.columns
        for field, value in changes.items():
            if value is None and not columns[field].nullable:
                raise ValueError(f"{field} cannot be empty")

    def get(self, entity_id: str):
        return self.db.get(self.model, entity_id)

    def get_or_raise(self, entity_id: str):
        entity = self.get(entity_id)
        if not entity:
            raise ValueError(f"{self.label} {entity_id} not found")
        return entity

    def create(
        self,
        request: BaseModel,
        created_by: str = "",
        entity_id: str | None = None,
        created_at: datetime | None = None,
    ):
        """
        Insert a new row.

        entity_id and created_at are only passed when a deleted
        row is being brought back; the row then keeps its old
        identity so references to it stay valid.
        """
        data = request.model_dump()
        self.check_references(data)

        if entity_id is not None and self.get(entity_id):
            raise ValueError(f"{self.label} {entity_id} already exists")

        entity = self.model(**data, created_by=created_by)
        if entity_id is not None:
            entity.id = entity_id
        if created_at is not None:
            entity.created_at = created_at
        self.db.add(entity)
        self.db.flush()
        return entity

    def update(self, entity_id: str, request: BaseModel):
        """
        Apply the fields that were set on the request.

        Returns None if the row doesn't exist.
        """
        entity = self.get(entity_id)
        if not entity:
            return None

        changes = request.model_dump(exclude_unset=True)
        self._check_not_null(changes)
        self.check_references(changes)

        for field, value in changes.items():
            setattr(entity, field, value)
        self.db.flush()
        return entity

    def delete(self, entity_id: str) -> bool:
        """
        Remove a row. Returns False if it doesn't exist, raises
        ValueError if other rows still point at it.
        """
        entity = self.get(entity_id)
        if not entity:
            return False
        self.check_dependents(entity_id)
        self.db.delete(entity)
        self.db.flush()
        return True

    def list(self, status=None, search: str | None = None) -> list:
        """Newest first, optionally filtered by status and a search term."""
        query = select(self.model)
        if status is not None:
            query = query.where(self.model.status == status)
        if search and self.search_fields:
            pattern = f"%{search}%"
            query = query.where(or_(*[
                getattr(self.model, field).ilike(pattern)
                for field in self.search_fields
            ]))
        query = query.order_by(getattr(self.model, self.order_by).desc())
        return list(self.db.execute(query).scalars().all())
