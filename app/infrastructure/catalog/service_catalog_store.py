from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from app.application.dto.records import describe_validation_error
from app.application.exceptions import CatalogValidationError
from app.application.ports.record_store import RecordStorePort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.service_catalog import WAX_ADD_ON_ID, PriceEntry, ServiceDefinition

SERVICES_COLLECTION = "services"

logger = logging.getLogger(__name__)


class PriceEntryDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    price: float = Field(ge=0)
    commission: float = Field(ge=0)
    coupon_commission: float | None = Field(None, ge=0, alias="couponCommission")


class ServiceDocument(BaseModel):
    """Shape of a document in the tenant's `services` collection."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    name: str
    needs_size: StrictBool = Field(False, alias="needsSize")
    has_coupon: StrictBool = Field(False, alias="hasCoupon")
    wax_eligible: StrictBool | None = Field(None, alias="waxEligible")
    order: int = 0
    prices: dict[str, PriceEntryDocument | None] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class ServiceCatalogStore(ServiceCatalogPort):
    """Service catalog kept in the tenant's `services` collection, validated on load."""

    def __init__(self, store: RecordStorePort) -> None:
        self._store = store

    def list_services(self, tenant_id: str) -> list[ServiceDefinition]:
        services: list[ServiceDefinition] = []
        for document in self._store.list(tenant_id, SERVICES_COLLECTION):
            try:
                services.append(service_from_document(document))
            except CatalogValidationError as e:
                logger.warning(
                    "Skipping invalid service document",
                    extra={"tenant_id": tenant_id, "service_id": document.get("id"), "reason": str(e)},
                )
        return sorted(services, key=lambda s: (s.order, s.id))

    def get_service(self, tenant_id: str, service_id: str) -> ServiceDefinition | None:
        document = self._store.get(tenant_id, SERVICES_COLLECTION, service_id)
        if document is None:
            return None
        try:
            return service_from_document(document)
        except CatalogValidationError as e:
            logger.warning(
                "Invalid service document",
                extra={"tenant_id": tenant_id, "service_id": service_id, "reason": str(e)},
            )
            return None

    def save_service(self, tenant_id: str, service: ServiceDefinition) -> None:
        self._store.set(tenant_id, SERVICES_COLLECTION, service.id, service_to_document(service))


def service_from_document(document: dict[str, Any]) -> ServiceDefinition:
    """Build a typed ServiceDefinition from a stored document or raise CatalogValidationError."""
    try:
        parsed = ServiceDocument.model_validate(document)
    except ValidationError as e:
        raise CatalogValidationError(f"{document.get('id')}: {describe_validation_error(e)}") from e

    wax_eligible = parsed.wax_eligible
    if wax_eligible is None:
        wax_eligible = legacy_wax_eligible(parsed.id)
        logger.info(
            "Service has no waxEligible flag, using legacy name rule",
            extra={"service_id": parsed.id, "reason": f"waxEligible={wax_eligible}"},
        )

    return ServiceDefinition(
        id=parsed.id,
        name=parsed.name,
        needs_size=parsed.needs_size,
        has_coupon=parsed.has_coupon,
        prices={key: _price_entry(entry) for key, entry in parsed.prices.items()},
        order=parsed.order,
        wax_eligible=wax_eligible,
    )


def _price_entry(entry: PriceEntryDocument | None) -> PriceEntry | None:
    if entry is None:
        return None
    return PriceEntry(price=entry.price, commission=entry.commission, coupon_commission=entry.coupon_commission)


def service_to_document(service: ServiceDefinition) -> dict[str, Any]:
    prices: dict[str, Any] = {}
    for key, entry in service.prices.items():
        if entry is None:
            prices[key] = None
            continue
        doc: dict[str, Any] = {"price": entry.price, "commission": entry.commission}
        if entry.coupon_commission is not None:
            doc["couponCommission"] = entry.coupon_commission
        prices[key] = doc
    return {
        "name": service.name,
        "needsSize": service.needs_size,
        "hasCoupon": service.has_coupon,
        "waxEligible": service.wax_eligible,
        "order": service.order,
        "prices": prices,
    }


def legacy_wax_eligible(service_id: str) -> bool:
    """Eligibility rule of the original dashboard: the service id mentions "wash"."""
    return service_id != WAX_ADD_ON_ID and "wash" in service_id.lower()
