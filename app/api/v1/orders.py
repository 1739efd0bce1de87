from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.v1.schemas import OrderCreateSchema, OrderSchema, OrderStatusUpdateSchema, OrderUpdateSchema
from app.application.exceptions import InvalidStatusTransitionError, NotFoundError
from app.application.use_cases.orders import OrdersUseCase
from app.domain.entities.order import Order, OrderStatus
from app.wiring.dependencies import get_orders_use_case, get_tenant_id

router = APIRouter(prefix="/orders")


def to_order_schema(order: Order) -> OrderSchema:
    return OrderSchema(
        id=order.id,
        supplier=order.supplier,
        date=order.date,
        status=order.status,
        total=order.total,
    )


@router.get("", response_model=list[OrderSchema])
def list_orders(
    status: OrderStatus | None = None,
    tenant_id: str = Depends(get_tenant_id),
    uc: OrdersUseCase = Depends(get_orders_use_case),
):
    return [to_order_schema(o) for o in uc.list_orders(tenant_id, status)]


@router.post("", response_model=OrderSchema, status_code=201)
def create_order(
    req: OrderCreateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: OrdersUseCase = Depends(get_orders_use_case),
):
    try:
        order = uc.create_order(tenant_id, supplier=req.supplier, total=req.total, date=req.date, status=req.status)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return to_order_schema(order)


@router.patch("/{order_id}", response_model=OrderSchema)
def update_order(
    order_id: str,
    req: OrderUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: OrdersUseCase = Depends(get_orders_use_case),
):
    try:
        order = uc.update_order(tenant_id, order_id, supplier=req.supplier, total=req.total, date=req.date)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return to_order_schema(order)


@router.post("/{order_id}/status", response_model=OrderSchema)
def change_order_status(
    order_id: str,
    req: OrderStatusUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: OrdersUseCase = Depends(get_orders_use_case),
):
    try:
        order = uc.change_status(tenant_id, order_id, req.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return to_order_schema(order)


@router.delete("/{order_id}", status_code=204)
def delete_order(
    order_id: str,
    tenant_id: str = Depends(get_tenant_id),
    uc: OrdersUseCase = Depends(get_orders_use_case),
) -> Response:
    try:
        uc.delete_order(tenant_id, order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
