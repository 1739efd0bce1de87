from __future__ import annotations

import logging
from dataclasses import replace

from app.application.exceptions import CatalogValidationError, NotFoundError
from app.application.ports.service_catalog import ServiceCatalogPort
from app.domain.entities.service_catalog import PriceEntry, ServiceDefinition


class CatalogAdminUseCase:
    """Seeding and administrative edits of a tenant's service catalog."""

    def __init__(self, catalog: ServiceCatalogPort, defaults: list[ServiceDefinition]) -> None:
        self._catalog = catalog
        self._defaults = list(defaults)
        self._logger = logging.getLogger(__name__)

    def seed_defaults(self, tenant_id: str) -> list[str]:
        """Write every default service missing from the tenant's catalog. Returns the seeded ids."""
        existing = {service.id for service in self._catalog.list_services(tenant_id)}
        missing = [service for service in self._defaults if service.id not in existing]
        if not missing:
            self._logger.info("All default services already exist", extra={"tenant_id": tenant_id})
            return []

        for service in missing:
            self._catalog.save_service(tenant_id, service)
        seeded = [service.id for service in missing]
        self._logger.info(
            "Seeded default services",
            extra={"tenant_id": tenant_id, "reason": ",".join(seeded)},
        )
        return seeded

    def list_services(self, tenant_id: str, seed_if_empty: bool = False) -> list[ServiceDefinition]:
        services = self._catalog.list_services(tenant_id)
        if not services and seed_if_empty:
            self.seed_defaults(tenant_id)
            services = self._catalog.list_services(tenant_id)
        return services

    def update_price_entry(
        self,
        tenant_id: str,
        service_id: str,
        size_key: str,
        price: float | None = None,
        commission: float | None = None,
        coupon_commission: float | None = None,
        clear_coupon: bool = False,
    ) -> ServiceDefinition:
        """Merge the given values into one price entry. `clear_coupon` removes its coupon tier."""
        service = self._require(tenant_id, service_id)
        entry = service.prices.get(size_key)
        if entry is None:
            raise NotFoundError(f"Service '{service_id}' has no price for '{size_key}'")

        for label, value in (("price", price), ("commission", commission), ("coupon_commission", coupon_commission)):
            if value is not None and value < 0:
                raise CatalogValidationError(f"{label} must not be negative")
        if clear_coupon and coupon_commission is not None:
            raise CatalogValidationError("coupon_commission cannot be set and cleared at once")

        updated_entry = PriceEntry(
            price=entry.price if price is None else float(price),
            commission=entry.commission if commission is None else float(commission),
            coupon_commission=None if clear_coupon else (
                entry.coupon_commission if coupon_commission is None else float(coupon_commission)
            ),
        )
        updated = replace(service, prices={**service.prices, size_key: updated_entry})
        self._catalog.save_service(tenant_id, updated)
        self._logger.info(
            "Service price updated",
            extra={"tenant_id": tenant_id, "service_id": service_id, "reason": size_key},
        )
        return updated

    def set_has_coupon(self, tenant_id: str, service_id: str, has_coupon: bool) -> ServiceDefinition:
        updated = replace(self._require(tenant_id, service_id), has_coupon=has_coupon)
        self._catalog.save_service(tenant_id, updated)
        return updated

    def set_wax_eligible(self, tenant_id: str, service_id: str, wax_eligible: bool) -> ServiceDefinition:
        updated = replace(self._require(tenant_id, service_id), wax_eligible=wax_eligible)
        self._catalog.save_service(tenant_id, updated)
        return updated

    def _require(self, tenant_id: str, service_id: str) -> ServiceDefinition:
        service = self._catalog.get_service(tenant_id, service_id)
        if service is None:
            raise NotFoundError(f"Service '{service_id}' not found")
        return service
