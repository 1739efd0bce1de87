from __future__ import annotations

from typing import Mapping

from app.domain.entities.sale import PaymentMethod, PriceQuote, ResolvedSale, SaleRequest
from app.domain.entities.service_catalog import (
    DEFAULT_PRICE_KEY,
    WAX_ADD_ON_ID,
    PriceEntry,
    ServiceDefinition,
)


def resolve_price(request: SaleRequest, catalog: Mapping[str, ServiceDefinition]) -> PriceQuote | None:
    """
    Resolve a sale selection to an (amount, commission) pair.

    Returns None while the selection is incomplete: unknown service, missing
    size for a sized service, or a size the service does not price. Never raises
    for partial input and performs no rounding.
    """
    service = catalog.get(request.service_id) if request.service_id else None
    if service is None:
        return None

    entry = service.entry_for(request.car_size)
    if entry is None:
        return None

    if request.payment_method == PaymentMethod.COUPON and service.has_coupon and entry.supports_coupon:
        amount = 0.0
        commission = entry.coupon_commission
    else:
        amount = entry.price
        commission = entry.commission

    if request.wax_add_on:
        wax_entry = _wax_entry(service, catalog)
        if wax_entry is not None:
            amount += wax_entry.price
            commission += wax_entry.commission

    # Staff still earn commission on unpaid work.
    if request.payment_method == PaymentMethod.NOT_PAID:
        amount = 0.0

    return PriceQuote(amount=amount, commission=commission)


def resolve_sale(request: SaleRequest, catalog: Mapping[str, ServiceDefinition]) -> ResolvedSale | None:
    quote = resolve_price(request, catalog)
    if quote is None:
        return None
    return ResolvedSale(
        amount=quote.amount,
        commission=quote.commission,
        payment_method=request.payment_method,
        has_coupon=request.payment_method == PaymentMethod.COUPON,
        wax_add_on=request.wax_add_on,
        is_paid=request.payment_method != PaymentMethod.NOT_PAID,
    )


def size_options(service: ServiceDefinition) -> list[str]:
    """Size keys a sized service prices, cheapest first."""
    if not service.needs_size:
        return []
    priced = [(key, entry) for key, entry in service.prices.items() if entry is not None]
    return [key for key, entry in sorted(priced, key=lambda item: item[1].price)]


def coupon_available(service: ServiceDefinition, car_size: str | None = None) -> bool:
    if not service.has_coupon:
        return False
    entry = service.entry_for(car_size)
    if entry is None:
        # No size picked yet; the service-level flag decides.
        return service.needs_size and not car_size
    return entry.supports_coupon


def wax_option_available(service: ServiceDefinition, catalog: Mapping[str, ServiceDefinition]) -> bool:
    return _wax_entry(service, catalog) is not None


def payment_options(service: ServiceDefinition, car_size: str | None = None) -> list[PaymentMethod]:
    options = [PaymentMethod.CASH, PaymentMethod.MACHINE, PaymentMethod.NOT_PAID]
    if coupon_available(service, car_size):
        options.insert(0, PaymentMethod.COUPON)
    return options


def _wax_entry(service: ServiceDefinition, catalog: Mapping[str, ServiceDefinition]) -> PriceEntry | None:
    if not service.wax_eligible or service.id == WAX_ADD_ON_ID:
        return None
    wax_service = catalog.get(WAX_ADD_ON_ID)
    if wax_service is None:
        return None
    return wax_service.prices.get(DEFAULT_PRICE_KEY)
