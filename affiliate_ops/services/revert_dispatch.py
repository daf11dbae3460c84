"""
Revert dispatch — turns a reverted action into the inverse
mutation against the entity store.

    action   inverse                          snapshot used
    delete   recreate the row                 previous_data
    update   overwrite with the prior fields  previous_data
    create   delete the row                   (entity_id only)

The six collections share no schema, so each entity type
gets its own entry naming the service that owns it and the
schemas its snapshot must satisfy. A snapshot is validated
against its entity's response schema before it is used;
nothing is copied field-by-field from an unchecked dict.

Every failure surfaces as ValueError, the same error type
the services raise for store-side rejections.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from affiliate_ops.models.enums import ActionType, EntityType
from affiliate_ops.schemas.undo import ActionRecord, Snapshot
from affiliate_ops.schemas.identity import (
    IdentityCreate, IdentityUpdate, IdentityResponse,
)
from affiliate_ops.schemas.website import (
    WebsiteCreate, WebsiteUpdate, WebsiteResponse,
)
from affiliate_ops.schemas.card import CardCreate, CardUpdate, CardResponse
from affiliate_ops.schemas.advertiser import (
    AdvertiserCreate, AdvertiserUpdate, AdvertiserResponse,
)
from affiliate_ops.schemas.platform_account import (
    PlatformAccountCreate, PlatformAccountUpdate, PlatformAccountResponse,
)
from affiliate_ops.schemas.order import OrderCreate, OrderUpdate, OrderResponse
from affiliate_ops.services.base import CrudService
from affiliate_ops.services.master_data import (
    IdentityService, WebsiteService, CardService,
)
from affiliate_ops.services.platform_data import (
    AdvertiserService, PlatformAccountService, OrderService,
)


@dataclass(frozen=True)
class InverseOperations:
    """The three inverse mutations for one entity type."""

    service: type[CrudService]
    snapshot: type[BaseModel]
    create: type[BaseModel]
    update: type[BaseModel]

    def _load(self, record: ActionRecord, data: Snapshot | None) -> BaseModel:
        if data is None:
            raise ValueError(
                f"Action {record.id} has no snapshot to restore from"
            )
        try:
            return self.snapshot.model_validate(data)
        except ValidationError as e:
            raise ValueError(
                f"Snapshot of {record.entity_type.value} {record.entity_id} "
                f"is invalid ({e.error_count()} error(s))"
            ) from e

    def recreate(self, db: Session, record: ActionRecord):
        """Undo a delete: insert the row again under its old id."""
        snapshot = self._load(record, record.previous_data)
        request = self.create.model_validate(
            snapshot.model_dump(include=set(self.create.model_fields))
        )
        return self.service(db).create(
            request,
            created_by=snapshot.created_by,
            entity_id=record.entity_id,
            created_at=snapshot.created_at,
        )

    def restore(self, db: Session, record: ActionRecord):
        """Undo an update: write every prior field back."""
        snapshot = self._load(record, record.previous_data)
        request = self.update.model_validate(
            snapshot.model_dump(include=set(self.update.model_fields))
        )
        service = self.service(db)
        entity = service.update(record.entity_id, request)
        if entity is None:
            raise ValueError(f"{service.label} {record.entity_id} not found")
        return entity

    def remove(self, db: Session, record: ActionRecord):
        """Undo a create: delete the row."""
        service = self.service(db)
        if not service.delete(record.entity_id):
            raise ValueError(f"{service.label} {record.entity_id} not found")
        return None


INVERSE_OPERATIONS: dict[EntityType, InverseOperations] = {
    EntityType.IDENTITY: InverseOperations(
        service=IdentityService,
        snapshot=IdentityResponse,
        create=IdentityCreate,
        update=IdentityUpdate,
    ),
    EntityType.WEBSITE: InverseOperations(
        service=WebsiteService,
        snapshot=WebsiteResponse,
        create=WebsiteCreate,
        update=WebsiteUpdate,
    ),
    EntityType.CARD: InverseOperations(
        service=CardService,
        snapshot=CardResponse,
        create=CardCreate,
        update=CardUpdate,
    ),
    EntityType.ADVERTISER: InverseOperations(
        service=AdvertiserService,
        snapshot=AdvertiserResponse,
        create=AdvertiserCreate,
        update=AdvertiserUpdate,
    ),
    EntityType.ACCOUNT: InverseOperations(
        service=PlatformAccountService,
        snapshot=PlatformAccountResponse,
        create=PlatformAccountCreate,
        update=PlatformAccountUpdate,
    ),
    EntityType.ORDER: InverseOperations(
        service=OrderService,
        snapshot=OrderResponse,
        create=OrderCreate,
        update=OrderUpdate,
    ),
}


def apply_inverse(db: Session, record: ActionRecord):
    """
    Apply the mutation that undoes record.

    Returns the restored entity, or None when the inverse
    was a delete. The caller commits.
    """
    operations = INVERSE_OPERATIONS[record.entity_type]
    if record.action == ActionType.DELETE:
        return operations.recreate(db, record)
    if record.action == ActionType.UPDATE:
        return operations.restore(db, record)
    return operations.remove(db, record)
