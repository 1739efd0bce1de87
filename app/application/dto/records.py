from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.application.exceptions import InvalidRecordError
from app.domain.entities.inventory import InventoryItem
from app.domain.entities.order import Order, OrderStatus
from app.domain.entities.preferences import Preferences
from app.domain.entities.sale import SaleRecord
from app.domain.entities.staff import StaffMember

# Stored documents keep the dashboard's camelCase field names.

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StoredDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = None


class SaleDocument(StoredDocument):
    service: str = "Unknown Service"
    staff_name: str = Field("", alias="staffName")
    date: str = ""
    amount: float = 0.0
    commission: float = 0.0
    payment_method: str | None = Field(None, alias="paymentMethod")
    has_coupon: bool = Field(False, alias="hasCoupon")
    wax_add_on: bool = Field(False, alias="waxAddOn")
    is_paid: bool = Field(True, alias="isPaid")
    car_size: str | None = Field(None, alias="carSize")


class InventoryDocument(StoredDocument):
    name: str = ""
    category: str = ""
    quantity: int = 0
    purchase_price: float = Field(0.0, alias="purchasePrice")
    location: str | None = None


class OrderDocument(StoredDocument):
    supplier: str = ""
    date: str = ""
    status: OrderStatus = OrderStatus.PENDING
    total: float = 0.0


class StaffDocument(StoredDocument):
    name: str = ""


class PreferencesDocument(StoredDocument):
    currency_symbol: str | None = Field(None, alias="currencySymbol")
    theme: str | None = None


def describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'document'}: {err['msg']}" for err in error.errors()
    )


def _validate(model: type[StoredDocument], doc: dict[str, Any]) -> Any:
    try:
        return model.model_validate(doc)
    except ValidationError as e:
        raise InvalidRecordError(f"{doc.get('id')}: {describe_validation_error(e)}") from e


def _parse_all(docs: Iterable[dict[str, Any]], parse: Callable[[dict[str, Any]], T]) -> list[T]:
    """Parse every document, skipping the ones that fail validation."""
    parsed: list[T] = []
    for doc in docs:
        try:
            parsed.append(parse(doc))
        except InvalidRecordError as e:
            logger.warning("Skipping invalid stored record", extra={"reason": str(e)})
    return parsed


def sale_to_document(sale: SaleRecord) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "service": sale.service,
        "staffName": sale.staff_name,
        "date": sale.date,
        "amount": sale.amount,
        "commission": sale.commission,
        "hasCoupon": sale.has_coupon,
        "paymentMethod": sale.payment_method,
        "waxAddOn": sale.wax_add_on,
        "isPaid": sale.is_paid,
    }
    if sale.car_size:
        doc["carSize"] = sale.car_size
    return doc


def sale_from_document(doc: dict[str, Any]) -> SaleRecord:
    parsed: SaleDocument = _validate(SaleDocument, doc)
    return SaleRecord(
        id=parsed.id,
        service=parsed.service,
        staff_name=parsed.staff_name,
        date=parsed.date,
        amount=parsed.amount,
        commission=parsed.commission,
        payment_method=parsed.payment_method,
        has_coupon=parsed.has_coupon,
        wax_add_on=parsed.wax_add_on,
        is_paid=parsed.is_paid,
        car_size=parsed.car_size,
    )


def sales_from_documents(docs: Iterable[dict[str, Any]]) -> list[SaleRecord]:
    return _parse_all(docs, sale_from_document)


def inventory_to_document(item: InventoryItem) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "name": item.name,
        "category": item.category,
        "quantity": item.quantity,
        "purchasePrice": item.purchase_price,
    }
    if item.location:
        doc["location"] = item.location
    return doc


def inventory_from_document(doc: dict[str, Any]) -> InventoryItem:
    parsed: InventoryDocument = _validate(InventoryDocument, doc)
    return InventoryItem(
        id=parsed.id,
        name=parsed.name,
        category=parsed.category,
        quantity=parsed.quantity,
        purchase_price=parsed.purchase_price,
        location=parsed.location,
    )


def inventory_from_documents(docs: Iterable[dict[str, Any]]) -> list[InventoryItem]:
    return _parse_all(docs, inventory_from_document)


def order_to_document(order: Order) -> dict[str, Any]:
    return {
        "supplier": order.supplier,
        "date": order.date,
        "status": order.status.value,
        "total": order.total,
    }


def order_from_document(doc: dict[str, Any]) -> Order:
    parsed: OrderDocument = _validate(OrderDocument, doc)
    return Order(
        id=parsed.id,
        supplier=parsed.supplier,
        date=parsed.date,
        status=parsed.status,
        total=parsed.total,
    )


def orders_from_documents(docs: Iterable[dict[str, Any]]) -> list[Order]:
    return _parse_all(docs, order_from_document)


def staff_from_document(doc: dict[str, Any]) -> StaffMember:
    parsed: StaffDocument = _validate(StaffDocument, doc)
    return StaffMember(id=parsed.id, name=parsed.name)


def staff_from_documents(docs: Iterable[dict[str, Any]]) -> list[StaffMember]:
    return _parse_all(docs, staff_from_document)


def preferences_from_document(doc: dict[str, Any] | None, defaults: Preferences) -> Preferences:
    if not doc:
        return defaults
    try:
        parsed: PreferencesDocument = _validate(PreferencesDocument, doc)
    except InvalidRecordError as e:
        logger.warning("Invalid stored preferences, using defaults", extra={"reason": str(e)})
        return defaults
    return Preferences(
        currency_symbol=parsed.currency_symbol or defaults.currency_symbol,
        theme=parsed.theme or defaults.theme,
    )


def preferences_to_document(preferences: Preferences) -> dict[str, Any]:
    return {"currencySymbol": preferences.currency_symbol, "theme": preferences.theme}
