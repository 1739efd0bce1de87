import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import RecordSaleRequestSchema, SaleQuoteSchema, SaleRecordSchema, SaleRequestSchema
from app.application.exceptions import NoStaffError, NotFoundError, SaleValidationError
from app.application.use_cases.record_sale import RecordSaleUseCase
from app.application.use_cases.settings import SettingsUseCase
from app.application.utils.formatting import format_money
from app.domain.entities.sale import SaleRecord, SaleRequest
from app.wiring.dependencies import get_record_sale_use_case, get_settings_use_case, get_tenant_id

router = APIRouter(prefix="/sales")
logger = logging.getLogger(__name__)


def to_sale_request(req: SaleRequestSchema) -> SaleRequest:
    return SaleRequest(
        service_id=req.service_id or None,
        car_size=req.car_size or None,
        payment_method=req.payment_method,
        wax_add_on=req.wax_add_on,
    )


def to_sale_schema(sale: SaleRecord) -> SaleRecordSchema:
    return SaleRecordSchema(
        id=sale.id,
        service=sale.service,
        staff_name=sale.staff_name,
        car_size=sale.car_size,
        date=sale.date,
        amount=sale.amount,
        commission=sale.commission,
        payment_method=sale.payment_method,
        has_coupon=sale.has_coupon,
        wax_add_on=sale.wax_add_on,
        is_paid=sale.is_paid,
    )


@router.post("/quote", response_model=SaleQuoteSchema)
def quote_sale(
    req: SaleRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: RecordSaleUseCase = Depends(get_record_sale_use_case),
    settings_uc: SettingsUseCase = Depends(get_settings_use_case),
):
    resolved = uc.quote(tenant_id, to_sale_request(req))
    if resolved is None:
        return SaleQuoteSchema(complete=False, wax_add_on=req.wax_add_on)

    preferences = settings_uc.get_preferences(tenant_id)
    return SaleQuoteSchema(
        complete=True,
        amount=resolved.amount,
        commission=resolved.commission,
        display_amount=format_money(resolved.amount, preferences),
        display_commission=format_money(resolved.commission, preferences),
        has_coupon=resolved.has_coupon,
        wax_add_on=resolved.wax_add_on,
        is_paid=resolved.is_paid,
    )


@router.post("", response_model=SaleRecordSchema, status_code=201)
def record_sale(
    req: RecordSaleRequestSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: RecordSaleUseCase = Depends(get_record_sale_use_case),
):
    try:
        sale = uc.execute(tenant_id, to_sale_request(req), req.staff_id)
    except SaleValidationError as e:
        logger.info("Sale rejected", extra={"tenant_id": tenant_id, "reason": ",".join(e.fields)})
        raise HTTPException(status_code=422, detail={"message": str(e), "fields": e.fields})
    except NoStaffError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.exception("Failed to record sale", extra={"tenant_id": tenant_id, "reason": str(e)})
        raise HTTPException(status_code=500, detail="Failed to record sale")
    return to_sale_schema(sale)


@router.get("", response_model=list[SaleRecordSchema])
def list_sales(
    tenant_id: str = Depends(get_tenant_id),
    uc: RecordSaleUseCase = Depends(get_record_sale_use_case),
):
    return [to_sale_schema(s) for s in uc.list_sales(tenant_id)]
