"""
Helpers for recording forward mutations in the undo history.

Routers call these after the store mutation is committed,
never before, so a failed mutation never shows up as
something that can be undone.
"""

from affiliate_ops.models.enums import ActionType, EntityType
from affiliate_ops.schemas.undo import ActionEntry, Snapshot
from affiliate_ops.schemas.identity import IdentityResponse
from affiliate_ops.schemas.website import WebsiteResponse
from affiliate_ops.schemas.card import CardResponse
from affiliate_ops.schemas.advertiser import AdvertiserResponse
from affiliate_ops.schemas.platform_account import PlatformAccountResponse
from affiliate_ops.schemas.order import OrderResponse
from affiliate_ops.services.action_log import ActionLog


SNAPSHOT_SCHEMAS = {
    EntityType.IDENTITY: IdentityResponse,
    EntityType.WEBSITE: WebsiteResponse,
    EntityType.CARD: CardResponse,
    EntityType.ADVERTISER: AdvertiserResponse,
    EntityType.ACCOUNT: PlatformAccountResponse,
    EntityType.ORDER: OrderResponse,
}


def snapshot(entity_type: EntityType, entity) -> Snapshot:
    """Full field set of an entity as JSON-safe values."""
    schema = SNAPSHOT_SCHEMAS[entity_type]
    return schema.model_validate(entity).model_dump(mode="json")


def entity_label(entity_type: EntityType, entity) -> str:
    """The name shown for an entity in the history list."""
    if entity_type == EntityType.CARD:
        return f"****{entity.last_four}"
    if entity_type == EntityType.ACCOUNT:
        return entity.account_name
    if entity_type == EntityType.ORDER:
        return entity.order_number
    return entity.name


def record_create(
    log: ActionLog, user_id: str, entity_type: EntityType, entity
) -> str:
    return log.record(ActionEntry(
        user_id=user_id,
        action=ActionType.CREATE,
        entity_type=entity_type,
        entity_id=entity.id,
        entity_name=entity_label(entity_type, entity),
        new_data=snapshot(entity_type, entity),
    ))


def record_update(
    log: ActionLog,
    user_id: str,
    entity_type: EntityType,
    before: Snapshot,
    entity,
) -> str:
    """before is the snapshot taken prior to the update."""
    return log.record(ActionEntry(
        user_id=user_id,
        action=ActionType.UPDATE,
        entity_type=entity_type,
        entity_id=entity.id,
        entity_name=entity_label(entity_type, entity),
        previous_data=before,
        new_data=snapshot(entity_type, entity),
    ))


def record_delete(
    log: ActionLog,
    user_id: str,
    entity_type: EntityType,
    before: Snapshot,
    entity_name: str,
) -> str:
    return log.record(ActionEntry(
        user_id=user_id,
        action=ActionType.DELETE,
        entity_type=entity_type,
        entity_id=before["id"],
        entity_name=entity_name,
        previous_data=before,
    ))
