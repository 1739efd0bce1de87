from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.v1.schemas import InventoryItemCreateSchema, InventoryItemSchema, InventoryItemUpdateSchema
from app.application.exceptions import NotFoundError
from app.application.use_cases.inventory import InventoryUseCase
from app.domain.entities.inventory import InventoryItem, StockStatus
from app.wiring.dependencies import get_inventory_use_case, get_tenant_id

router = APIRouter(prefix="/inventory")


def to_item_schema(item: InventoryItem, threshold: int) -> InventoryItemSchema:
    return InventoryItemSchema(
        id=item.id,
        name=item.name,
        category=item.category,
        quantity=item.quantity,
        purchase_price=item.purchase_price,
        location=item.location,
        status=item.status(threshold),
        value=item.stock_value,
    )


@router.get("", response_model=list[InventoryItemSchema])
def list_items(
    status: StockStatus | None = None,
    tenant_id: str = Depends(get_tenant_id),
    uc: InventoryUseCase = Depends(get_inventory_use_case),
):
    return [to_item_schema(i, uc.low_stock_threshold) for i in uc.list_items(tenant_id, status)]


@router.post("", response_model=InventoryItemSchema, status_code=201)
def add_item(
    req: InventoryItemCreateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: InventoryUseCase = Depends(get_inventory_use_case),
):
    try:
        item = uc.add_item(
            tenant_id,
            name=req.name,
            category=req.category,
            quantity=req.quantity,
            purchase_price=req.purchase_price,
            location=req.location,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return to_item_schema(item, uc.low_stock_threshold)


@router.patch("/{item_id}", response_model=InventoryItemSchema)
def update_item(
    item_id: str,
    req: InventoryItemUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: InventoryUseCase = Depends(get_inventory_use_case),
):
    try:
        item = uc.update_item(tenant_id, item_id, **req.model_dump(exclude_unset=True))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return to_item_schema(item, uc.low_stock_threshold)


@router.delete("/{item_id}", status_code=204)
def delete_item(
    item_id: str,
    tenant_id: str = Depends(get_tenant_id),
    uc: InventoryUseCase = Depends(get_inventory_use_case),
) -> Response:
    try:
        uc.delete_item(tenant_id, item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
