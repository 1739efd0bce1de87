from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PaymentMethod(str, Enum):
    COUPON = "coupon"
    CASH = "cash"
    MACHINE = "machine"
    NOT_PAID = "not-paid"


@dataclass(frozen=True)
class SaleRequest:
    service_id: str | None = None
    car_size: str | None = None
    payment_method: PaymentMethod | None = None
    wax_add_on: bool = False


@dataclass(frozen=True)
class PriceQuote:
    amount: float
    commission: float


@dataclass(frozen=True)
class ResolvedSale:
    amount: float
    commission: float
    payment_method: PaymentMethod | None
    has_coupon: bool
    wax_add_on: bool
    is_paid: bool


@dataclass(frozen=True)
class SaleRecord:
    id: str | None
    service: str
    staff_name: str
    date: str  # ISO-8601 UTC
    amount: float
    commission: float
    payment_method: str | None
    has_coupon: bool
    wax_add_on: bool
    is_paid: bool
    car_size: str | None = None
