from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import (
    PriceEntrySchema,
    PriceEntryUpdateSchema,
    SeedResponseSchema,
    ServiceFlagsUpdateSchema,
    ServiceOptionsSchema,
    ServiceSchema,
    SizeOptionSchema,
)
from app.application.exceptions import CatalogValidationError, NotFoundError
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.catalog_admin import CatalogAdminUseCase
from app.application.use_cases.pricing import payment_options, size_options, wax_option_available
from app.application.utils.formatting import format_size_label
from app.core.config import settings
from app.domain.entities.service_catalog import DEFAULT_PRICE_KEY, WAX_ADD_ON_ID, ServiceDefinition
from app.wiring.dependencies import get_catalog_admin_use_case, get_service_catalog, get_tenant_id

router = APIRouter(prefix="/services")


def to_service_schema(service: ServiceDefinition) -> ServiceSchema:
    return ServiceSchema(
        id=service.id,
        name=service.name,
        needs_size=service.needs_size,
        has_coupon=service.has_coupon,
        wax_eligible=service.wax_eligible,
        order=service.order,
        prices={
            key: (
                PriceEntrySchema(
                    price=entry.price,
                    commission=entry.commission,
                    coupon_commission=entry.coupon_commission,
                )
                if entry is not None
                else None
            )
            for key, entry in service.prices.items()
        },
    )


@router.get("", response_model=list[ServiceSchema])
def list_services(
    tenant_id: str = Depends(get_tenant_id),
    uc: CatalogAdminUseCase = Depends(get_catalog_admin_use_case),
):
    services = uc.list_services(tenant_id, seed_if_empty=settings.SEED_DEFAULT_SERVICES)
    return [to_service_schema(s) for s in services]


@router.post("/seed", response_model=SeedResponseSchema)
def seed_services(
    tenant_id: str = Depends(get_tenant_id),
    uc: CatalogAdminUseCase = Depends(get_catalog_admin_use_case),
):
    return SeedResponseSchema(seeded=uc.seed_defaults(tenant_id))


@router.patch("/{service_id}/prices/{size_key}", response_model=ServiceSchema)
def update_price_entry(
    service_id: str,
    size_key: str,
    req: PriceEntryUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: CatalogAdminUseCase = Depends(get_catalog_admin_use_case),
):
    try:
        updated = uc.update_price_entry(
            tenant_id,
            service_id,
            size_key,
            price=req.price,
            commission=req.commission,
            coupon_commission=req.coupon_commission,
            clear_coupon=req.clear_coupon,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return to_service_schema(updated)


@router.patch("/{service_id}", response_model=ServiceSchema)
def update_service_flags(
    service_id: str,
    req: ServiceFlagsUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: CatalogAdminUseCase = Depends(get_catalog_admin_use_case),
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
):
    try:
        if req.has_coupon is not None:
            uc.set_has_coupon(tenant_id, service_id, req.has_coupon)
        if req.wax_eligible is not None:
            uc.set_wax_eligible(tenant_id, service_id, req.wax_eligible)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    service = catalog.get_service(tenant_id, service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Service '{service_id}' not found")
    return to_service_schema(service)


@router.get("/{service_id}/options", response_model=ServiceOptionsSchema)
def service_options(
    service_id: str,
    car_size: str | None = None,
    tenant_id: str = Depends(get_tenant_id),
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
):
    snapshot = catalog.snapshot(tenant_id)
    service = snapshot.get(service_id)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Service '{service_id}' not found")

    wax_available = wax_option_available(service, snapshot)
    wax_price = None
    if wax_available:
        wax_price = snapshot[WAX_ADD_ON_ID].prices[DEFAULT_PRICE_KEY].price

    return ServiceOptionsSchema(
        service_id=service.id,
        sizes=[
            SizeOptionSchema(key=key, label=format_size_label(key), price=service.prices[key].price)
            for key in size_options(service)
        ],
        payment_methods=payment_options(service, car_size),
        wax_add_on=wax_available,
        wax_add_on_price=wax_price,
    )
