from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    RECEIVED = "Received"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class Order:
    id: str | None
    supplier: str
    date: str  # ISO-8601
    status: OrderStatus
    total: float


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Mirror the actions offered on an order row of the orders page."""
    if target == OrderStatus.SHIPPED:
        return current != OrderStatus.SHIPPED
    if target == OrderStatus.RECEIVED:
        return current == OrderStatus.SHIPPED
    if target == OrderStatus.CANCELLED:
        return current != OrderStatus.CANCELLED
    if target == OrderStatus.PENDING:
        return current == OrderStatus.CANCELLED
    return False
