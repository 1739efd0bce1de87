from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from app.application.dto.records import sale_to_document, sales_from_documents
from app.application.exceptions import NoStaffError, NotFoundError, SaleValidationError
from app.application.ports.record_store import RecordStorePort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.pricing import resolve_sale
from app.application.utils.dates import to_iso, utc_now
from app.domain.entities.sale import ResolvedSale, SaleRecord, SaleRequest

SALES_COLLECTION = "sales"
STAFF_COLLECTION = "staff"


class RecordSaleUseCase:
    def __init__(
        self,
        store: RecordStorePort,
        catalog: ServiceCatalogPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def quote(self, tenant_id: str, request: SaleRequest) -> ResolvedSale | None:
        """Resolve a selection against the current catalog without persisting anything."""
        return resolve_sale(request, self._catalog.snapshot(tenant_id))

    def execute(self, tenant_id: str, request: SaleRequest, staff_id: str | None) -> SaleRecord:
        staff = self._store.list(tenant_id, STAFF_COLLECTION)
        if not staff:
            raise NoStaffError("Add staff members before recording a sale.")

        catalog = self._catalog.snapshot(tenant_id)
        service = catalog.get(request.service_id) if request.service_id else None

        missing: list[str] = []
        if service is None:
            missing.append("service_id")
        elif service.needs_size and not request.car_size:
            missing.append("car_size")
        if not staff_id:
            missing.append("staff_id")
        if request.payment_method is None:
            missing.append("payment_method")
        if missing:
            raise SaleValidationError(missing)

        member = next((s for s in staff if s.get("id") == staff_id), None)
        if member is None:
            raise NotFoundError(f"Staff member '{staff_id}' not found")

        resolved = resolve_sale(request, catalog)
        if resolved is None:
            # Service exists but the chosen size is not priced.
            raise SaleValidationError(["car_size"], "Selected size is not offered for this service")

        record = SaleRecord(
            id=None,
            service=service.name,
            staff_name=member.get("name") or "",
            date=to_iso(self._clock()),
            amount=resolved.amount,
            commission=resolved.commission,
            payment_method=resolved.payment_method.value if resolved.payment_method else None,
            has_coupon=resolved.has_coupon,
            wax_add_on=resolved.wax_add_on,
            is_paid=resolved.is_paid,
            car_size=request.car_size if service.needs_size else None,
        )
        sale_id = self._store.add(tenant_id, SALES_COLLECTION, sale_to_document(record))
        self._logger.info(
            "Sale recorded",
            extra={
                "tenant_id": tenant_id,
                "sale_id": sale_id,
                "service_id": service.id,
                "payment_method": record.payment_method,
            },
        )
        return replace(record, id=sale_id)

    def list_sales(self, tenant_id: str) -> list[SaleRecord]:
        sales = sales_from_documents(self._store.list(tenant_id, SALES_COLLECTION))
        return sorted(sales, key=lambda s: s.date, reverse=True)
