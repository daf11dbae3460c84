"""
Order API endpoints.

Every successful create, update and delete is recorded in
the undo history once it has been committed.
"""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from affiliate_ops.api.deps import get_action_log, get_current_user_id
from affiliate_ops.models.base import get_db
from affiliate_ops.models.enums import EntityType, OrderStatus
from affiliate_ops.schemas.order import (
    OrderCreate,
    OrderUpdate,
    OrderResponse,
)
from affiliate_ops.services import history
from affiliate_ops.services.action_log import ActionLog
from affiliate_ops.services.export import to_csv, export_filename
from affiliate_ops.services.platform_data import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=list[OrderResponse])
def list_orders(
    status: OrderStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """List orders by order date, latest first. q searches order number and product name."""
    return OrderService(db).list(status=status, search=q)


@router.get("/export")
def export_orders(
    status: OrderStatus | None = None,
    q: str | None = None,
    db: Session = Depends(get_db),
):
    """Download the filtered list as CSV."""
    rows = OrderService(db).list(status=status, search=q)
    filename = export_filename(EntityType.ORDER)
    return Response(
        content=to_csv(EntityType.ORDER, rows),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    db: Session = Depends(get_db),
):
    try:
        return OrderService(db).get_or_raise(order_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=OrderResponse, status_code=201)
def create_order(
    request: OrderCreate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = OrderService(db)
    try:
        order = service.create(request, created_by=user_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_create(action_log, user_id, EntityType.ORDER, order)
    return order


@router.patch("/{order_id}", response_model=OrderResponse)
def update_order(
    order_id: str,
    request: OrderUpdate,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = OrderService(db)
    try:
        order = service.get_or_raise(order_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ORDER, order)
    try:
        order = service.update(order_id, request)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))

    history.record_update(
        action_log, user_id, EntityType.ORDER, before, order
    )
    return order


@router.delete("/{order_id}", status_code=204)
def delete_order(
    order_id: str,
    db: Session = Depends(get_db),
    action_log: ActionLog = Depends(get_action_log),
    user_id: str = Depends(get_current_user_id),
):
    service = OrderService(db)
    try:
        order = service.get_or_raise(order_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    before = history.snapshot(EntityType.ORDER, order)
    name = history.entity_label(EntityType.ORDER, order)
    try:
        service.delete(order_id)
        db.commit()
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=400,
            detail=f"Order {order_id} is still referenced",
        )

    history.record_delete(action_log, user_id, EntityType.ORDER, before, name)
    return Response(status_code=204)
