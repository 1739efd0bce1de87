from __future__ import annotations

from dataclasses import replace
from typing import Any

from app.application.dto.records import inventory_from_document, inventory_from_documents, inventory_to_document
from app.application.exceptions import NotFoundError
from app.application.ports.record_store import RecordStorePort
from app.domain.entities.inventory import InventoryItem, StockStatus

INVENTORY_COLLECTION = "inventory"


class InventoryUseCase:
    def __init__(self, store: RecordStorePort, low_stock_threshold: int = 10) -> None:
        self._store = store
        self._low_stock_threshold = low_stock_threshold

    @property
    def low_stock_threshold(self) -> int:
        return self._low_stock_threshold

    def add_item(
        self,
        tenant_id: str,
        name: str,
        category: str,
        quantity: int,
        purchase_price: float = 0.0,
        location: str | None = None,
    ) -> InventoryItem:
        if not (name or "").strip():
            raise ValueError("Item name is required")
        if quantity < 0:
            raise ValueError("Quantity must not be negative")
        item = InventoryItem(
            id=None,
            name=name.strip(),
            category=(category or "").strip(),
            quantity=quantity,
            purchase_price=purchase_price,
            location=location,
        )
        item_id = self._store.add(tenant_id, INVENTORY_COLLECTION, inventory_to_document(item))
        return replace(item, id=item_id)

    def update_item(self, tenant_id: str, item_id: str, **changes: Any) -> InventoryItem:
        current = self._require(tenant_id, item_id)
        if changes.get("quantity") is not None and changes["quantity"] < 0:
            raise ValueError("Quantity must not be negative")
        updated = replace(current, **{k: v for k, v in changes.items() if v is not None})
        self._store.set(tenant_id, INVENTORY_COLLECTION, item_id, inventory_to_document(updated), merge=True)
        return updated

    def delete_item(self, tenant_id: str, item_id: str) -> None:
        if not self._store.delete(tenant_id, INVENTORY_COLLECTION, item_id):
            raise NotFoundError(f"Inventory item '{item_id}' not found")

    def list_items(self, tenant_id: str, status: StockStatus | None = None) -> list[InventoryItem]:
        items = inventory_from_documents(self._store.list(tenant_id, INVENTORY_COLLECTION))
        items.sort(key=lambda item: item.name.lower())
        if status is None:
            return items
        return [item for item in items if item.status(self._low_stock_threshold) == status]

    def low_stock_items(self, tenant_id: str, limit: int | None = None) -> list[InventoryItem]:
        items = self.list_items(tenant_id, StockStatus.LOW_STOCK)
        return items[:limit] if limit else items

    def total_quantity(self, tenant_id: str) -> int:
        return sum(item.quantity for item in self.list_items(tenant_id))

    def stock_value(self, tenant_id: str) -> float:
        return sum(item.stock_value for item in self.list_items(tenant_id))

    def _require(self, tenant_id: str, item_id: str) -> InventoryItem:
        doc = self._store.get(tenant_id, INVENTORY_COLLECTION, item_id)
        if doc is None:
            raise NotFoundError(f"Inventory item '{item_id}' not found")
        return inventory_from_document(doc)
