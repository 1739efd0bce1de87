from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable

from app.application.dto.records import order_from_document, order_to_document, orders_from_documents
from app.application.exceptions import InvalidStatusTransitionError, NotFoundError
from app.application.ports.record_store import RecordStorePort
from app.application.utils.dates import to_iso, utc_now
from app.domain.entities.order import Order, OrderStatus, can_transition

ORDERS_COLLECTION = "orders"


class OrdersUseCase:
    """Supplier orders and their Pending/Shipped/Received/Cancelled workflow."""

    def __init__(self, store: RecordStorePort, clock: Callable[[], datetime] = utc_now) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def create_order(
        self,
        tenant_id: str,
        supplier: str,
        total: float,
        date: datetime | None = None,
        status: OrderStatus = OrderStatus.PENDING,
    ) -> Order:
        if not (supplier or "").strip():
            raise ValueError("Supplier is required")
        if total < 0:
            raise ValueError("Total must not be negative")
        order = Order(
            id=None,
            supplier=supplier.strip(),
            date=to_iso(date or self._clock()),
            status=status,
            total=float(total),
        )
        order_id = self._store.add(tenant_id, ORDERS_COLLECTION, order_to_document(order))
        return replace(order, id=order_id)

    def update_order(
        self,
        tenant_id: str,
        order_id: str,
        supplier: str | None = None,
        total: float | None = None,
        date: datetime | None = None,
    ) -> Order:
        current = self.get_order(tenant_id, order_id)
        if total is not None and total < 0:
            raise ValueError("Total must not be negative")
        updated = replace(
            current,
            supplier=supplier.strip() if supplier else current.supplier,
            total=current.total if total is None else float(total),
            date=to_iso(date) if date else current.date,
        )
        self._store.set(tenant_id, ORDERS_COLLECTION, order_id, order_to_document(updated), merge=True)
        return updated

    def change_status(self, tenant_id: str, order_id: str, status: OrderStatus) -> Order:
        current = self.get_order(tenant_id, order_id)
        if not can_transition(current.status, status):
            raise InvalidStatusTransitionError(
                f"Order cannot move from {current.status.value} to {status.value}"
            )
        self._store.set(tenant_id, ORDERS_COLLECTION, order_id, {"status": status.value}, merge=True)
        self._logger.info(
            "Order status changed",
            extra={"tenant_id": tenant_id, "order_id": order_id, "reason": f"{current.status.value}->{status.value}"},
        )
        return replace(current, status=status)

    def delete_order(self, tenant_id: str, order_id: str) -> None:
        if not self._store.delete(tenant_id, ORDERS_COLLECTION, order_id):
            raise NotFoundError(f"Order '{order_id}' not found")

    def get_order(self, tenant_id: str, order_id: str) -> Order:
        doc = self._store.get(tenant_id, ORDERS_COLLECTION, order_id)
        if doc is None:
            raise NotFoundError(f"Order '{order_id}' not found")
        return order_from_document(doc)

    def list_orders(self, tenant_id: str, status: OrderStatus | None = None) -> list[Order]:
        orders = orders_from_documents(self._store.list(tenant_id, ORDERS_COLLECTION))
        orders.sort(key=lambda o: o.date, reverse=True)
        if status is None:
            return orders
        return [o for o in orders if o.status == status]

    def received_total(self, tenant_id: str) -> float:
        return sum(o.total for o in self.list_orders(tenant_id, OrderStatus.RECEIVED))
