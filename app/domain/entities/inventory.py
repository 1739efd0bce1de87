from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StockStatus(str, Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


@dataclass(frozen=True)
class InventoryItem:
    id: str | None
    name: str
    category: str
    quantity: int
    purchase_price: float = 0.0
    location: str | None = None

    @property
    def stock_value(self) -> float:
        return self.quantity * (self.purchase_price or 0.0)

    def status(self, low_stock_threshold: int) -> StockStatus:
        if self.quantity <= 0:
            return StockStatus.OUT_OF_STOCK
        if self.quantity < low_stock_threshold:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK
