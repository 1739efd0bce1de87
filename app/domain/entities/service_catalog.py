from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PRICE_KEY = "default"
WAX_ADD_ON_ID = "wax-add-on"


@dataclass(frozen=True)
class PriceEntry:
    price: float
    commission: float
    coupon_commission: float | None = None  # only for sizes offering the coupon tier

    @property
    def supports_coupon(self) -> bool:
        return self.coupon_commission is not None


@dataclass(frozen=True)
class ServiceDefinition:
    id: str
    name: str
    needs_size: bool = False
    has_coupon: bool = False
    prices: dict[str, PriceEntry | None] = field(default_factory=dict)
    order: int = 0
    wax_eligible: bool = False

    def price_key(self, car_size: str | None) -> str | None:
        """Key into `prices` for a selection, None while a required size is missing."""
        if not self.needs_size:
            return DEFAULT_PRICE_KEY
        return car_size or None

    def entry_for(self, car_size: str | None) -> PriceEntry | None:
        key = self.price_key(car_size)
        if key is None:
            return None
        return self.prices.get(key)
