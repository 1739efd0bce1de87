from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable

from app.application.use_cases.pricing import coupon_available, resolve_price, wax_option_available
from app.domain.entities.sale import PaymentMethod, PriceQuote, SaleRequest
from app.domain.entities.service_catalog import ServiceDefinition

QuoteListener = Callable[[PriceQuote | None], None]

_FORM_FIELDS = {"service_id", "car_size", "payment_method", "wax_add_on", "staff_id"}


class SaleForm:
    """
    Sale entry form state.

    Every input change or catalog replacement normalises the selection and
    re-runs the pricing resolver, then notifies subscribers with the new quote.
    """

    def __init__(self, services: Iterable[ServiceDefinition] = ()) -> None:
        self._catalog: dict[str, ServiceDefinition] = {s.id: s for s in services}
        self._request = SaleRequest()
        self._staff_id: str | None = None
        self._quote: PriceQuote | None = None
        self._listeners: list[QuoteListener] = []
        self._logger = logging.getLogger(__name__)

    @property
    def request(self) -> SaleRequest:
        return self._request

    @property
    def staff_id(self) -> str | None:
        return self._staff_id

    @property
    def quote(self) -> PriceQuote | None:
        return self._quote

    @property
    def catalog(self) -> dict[str, ServiceDefinition]:
        return dict(self._catalog)

    def subscribe(self, listener: QuoteListener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> PriceQuote | None:
        unknown = set(changes) - _FORM_FIELDS
        if unknown:
            raise TypeError(f"Unknown sale form fields: {', '.join(sorted(unknown))}")

        if "staff_id" in changes:
            self._staff_id = changes.pop("staff_id") or None
        if "payment_method" in changes and changes["payment_method"] is not None:
            changes["payment_method"] = PaymentMethod(changes["payment_method"])

        request = self._request
        if "service_id" in changes and changes["service_id"] != request.service_id:
            # A new service starts from a clean selection.
            request = SaleRequest(service_id=changes["service_id"] or None)
            changes = {k: v for k, v in changes.items() if k != "service_id"}
        self._request = replace(request, **changes)
        return self._recompute()

    def replace_catalog(self, services: Iterable[ServiceDefinition]) -> PriceQuote | None:
        self._catalog = {s.id: s for s in services}
        self._logger.debug("Sale form catalog replaced", extra={"reason": f"{len(self._catalog)} services"})
        return self._recompute()

    def reset(self) -> None:
        self._request = SaleRequest()
        self._staff_id = None
        self._recompute()

    def errors(self) -> list[str]:
        """Required fields still missing, in form order."""
        missing: list[str] = []
        service = self._selected_service()
        if service is None:
            missing.append("service_id")
        elif service.needs_size and not self._request.car_size:
            missing.append("car_size")
        if not self._staff_id:
            missing.append("staff_id")
        if self._request.payment_method is None:
            missing.append("payment_method")
        return missing

    @property
    def can_submit(self) -> bool:
        return not self.errors() and self._quote is not None

    def _selected_service(self) -> ServiceDefinition | None:
        if not self._request.service_id:
            return None
        return self._catalog.get(self._request.service_id)

    def _normalize(self) -> None:
        request = self._request
        service = self._selected_service()
        if service is None:
            self._request = SaleRequest(service_id=request.service_id)
            return
        if not service.needs_size and request.car_size:
            request = replace(request, car_size=None)
        if request.payment_method == PaymentMethod.COUPON and not coupon_available(service, request.car_size):
            request = replace(request, payment_method=None)
        if request.wax_add_on and not wax_option_available(service, self._catalog):
            request = replace(request, wax_add_on=False)
        self._request = request

    def _recompute(self) -> PriceQuote | None:
        self._normalize()
        self._quote = resolve_price(self._request, self._catalog)
        for listener in list(self._listeners):
            listener(self._quote)
        return self._quote
