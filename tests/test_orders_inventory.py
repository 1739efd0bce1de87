"""
Tests for inventory, supplier orders and staff bookkeeping.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app.application.exceptions import InvalidStatusTransitionError, NotFoundError
from app.application.use_cases.inventory import InventoryUseCase
from app.application.use_cases.orders import OrdersUseCase
from app.application.use_cases.reports import ReportsUseCase
from app.application.use_cases.staff import StaffUseCase
from app.domain.entities.inventory import InventoryItem, StockStatus
from app.domain.entities.order import OrderStatus, can_transition
from app.infrastructure.store.memory_store import MemoryRecordStore

TENANT = "tenant-a"


def test_stock_status_thresholds():
    def item(quantity: int) -> InventoryItem:
        return InventoryItem(id=None, name="Soap", category="Chemicals", quantity=quantity)

    assert item(0).status(10) == StockStatus.OUT_OF_STOCK
    assert item(1).status(10) == StockStatus.LOW_STOCK
    assert item(9).status(10) == StockStatus.LOW_STOCK
    assert item(10).status(10) == StockStatus.IN_STOCK


def test_inventory_crud_and_filters():
    uc = InventoryUseCase(MemoryRecordStore(), low_stock_threshold=10)
    soap = uc.add_item(TENANT, " Soap ", "Chemicals", 4, purchase_price=2.5)
    uc.add_item(TENANT, "Towels", "Cloths", 0)
    uc.add_item(TENANT, "Brushes", "Tools", 25, purchase_price=1)

    assert soap.name == "Soap"
    assert [i.name for i in uc.list_items(TENANT)] == ["Brushes", "Soap", "Towels"]
    assert [i.name for i in uc.list_items(TENANT, StockStatus.OUT_OF_STOCK)] == ["Towels"]
    assert [i.name for i in uc.low_stock_items(TENANT)] == ["Soap"]
    assert uc.total_quantity(TENANT) == 29
    assert uc.stock_value(TENANT) == 35.0

    updated = uc.update_item(TENANT, soap.id, quantity=12)
    assert updated.quantity == 12
    assert updated.purchase_price == 2.5
    assert uc.low_stock_items(TENANT) == []

    uc.delete_item(TENANT, soap.id)
    with pytest.raises(NotFoundError):
        uc.delete_item(TENANT, soap.id)


def test_inventory_rejects_bad_input():
    uc = InventoryUseCase(MemoryRecordStore())
    with pytest.raises(ValueError):
        uc.add_item(TENANT, "  ", "Chemicals", 1)
    with pytest.raises(ValueError):
        uc.add_item(TENANT, "Soap", "Chemicals", -1)
    with pytest.raises(NotFoundError):
        uc.update_item(TENANT, "missing", quantity=1)


@pytest.mark.parametrize(
    ("current", "target", "allowed"),
    [
        (OrderStatus.PENDING, OrderStatus.SHIPPED, True),
        (OrderStatus.PENDING, OrderStatus.RECEIVED, False),
        (OrderStatus.SHIPPED, OrderStatus.RECEIVED, True),
        (OrderStatus.SHIPPED, OrderStatus.SHIPPED, False),
        (OrderStatus.RECEIVED, OrderStatus.CANCELLED, True),
        (OrderStatus.CANCELLED, OrderStatus.CANCELLED, False),
        (OrderStatus.CANCELLED, OrderStatus.PENDING, True),
        (OrderStatus.SHIPPED, OrderStatus.PENDING, False),
    ],
)
def test_order_transitions(current, target, allowed):
    assert can_transition(current, target) is allowed


def test_order_workflow():
    clock = lambda: datetime(2024, 3, 5, 8, 0, tzinfo=timezone.utc)  # noqa: E731
    uc = OrdersUseCase(MemoryRecordStore(), clock=clock)
    order = uc.create_order(TENANT, "Chemical Guys", 120)

    assert order.status == OrderStatus.PENDING
    assert order.date == "2024-03-05T08:00:00.000Z"

    with pytest.raises(InvalidStatusTransitionError):
        uc.change_status(TENANT, order.id, OrderStatus.RECEIVED)

    uc.change_status(TENANT, order.id, OrderStatus.SHIPPED)
    received = uc.change_status(TENANT, order.id, OrderStatus.RECEIVED)
    assert received.status == OrderStatus.RECEIVED
    assert uc.get_order(TENANT, order.id).status == OrderStatus.RECEIVED
    assert uc.received_total(TENANT) == 120


def test_order_update_and_listing():
    uc = OrdersUseCase(MemoryRecordStore())
    older = uc.create_order(TENANT, "A", 10, date=datetime(2024, 1, 1, tzinfo=timezone.utc))
    uc.create_order(TENANT, "B", 20, date=datetime(2024, 2, 1, tzinfo=timezone.utc), status=OrderStatus.SHIPPED)

    assert [o.supplier for o in uc.list_orders(TENANT)] == ["B", "A"]
    assert [o.supplier for o in uc.list_orders(TENANT, OrderStatus.SHIPPED)] == ["B"]

    updated = uc.update_order(TENANT, older.id, total=15)
    assert updated.total == 15
    assert updated.supplier == "A"

    with pytest.raises(ValueError):
        uc.create_order(TENANT, "", 10)
    with pytest.raises(NotFoundError):
        uc.delete_order(TENANT, "missing")


def test_staff_roster():
    uc = StaffUseCase(MemoryRecordStore())
    zaid = uc.add_staff(TENANT, "Zaid ")
    uc.add_staff(TENANT, "ahmed")

    assert zaid.name == "Zaid"
    assert [m.name for m in uc.list_staff(TENANT)] == ["ahmed", "Zaid"]

    uc.delete_staff(TENANT, zaid.id)
    assert [m.name for m in uc.list_staff(TENANT)] == ["ahmed"]
    with pytest.raises(ValueError):
        uc.add_staff(TENANT, " ")
    with pytest.raises(NotFoundError):
        uc.delete_staff(TENANT, zaid.id)


def test_order_dates_are_normalised_to_utc():
    """Stored dates must compare correctly inside the report range filter."""
    store = MemoryRecordStore()
    uc = OrdersUseCase(store)
    first_of_month = uc.create_order(TENANT, "A", 10, date=datetime(2024, 5, 1), status=OrderStatus.RECEIVED)
    late_evening = uc.create_order(
        TENANT,
        "B",
        20,
        date=datetime(2024, 5, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5))),
        status=OrderStatus.RECEIVED,
    )

    assert first_of_month.date == "2024-05-01T00:00:00.000Z"
    assert late_evening.date == "2024-06-01T04:00:00.000Z"

    purchases = ReportsUseCase(store).purchases_by_date(
        TENANT,
        datetime(2024, 5, 1, tzinfo=timezone.utc),
        datetime(2024, 5, 31, 23, 59, 59, tzinfo=timezone.utc),
    )
    assert [o.supplier for o in purchases.orders] == ["A"]

    moved = uc.update_order(TENANT, late_evening.id, date=datetime(2024, 5, 2, 12, 0, tzinfo=timezone.utc))
    assert moved.date == "2024-05-02T12:00:00.000Z"


def test_unreadable_order_documents_are_skipped():
    store = MemoryRecordStore()
    uc = OrdersUseCase(store)
    uc.create_order(TENANT, "A", 10, status=OrderStatus.RECEIVED)
    store.add(TENANT, "orders", {"supplier": "B", "date": "2024-01-01T00:00:00.000Z", "status": "Lost", "total": 5})
    store.add(TENANT, "orders", {"supplier": "C", "date": "2024-01-01T00:00:00.000Z", "status": "Pending", "total": "lots"})

    assert [o.supplier for o in uc.list_orders(TENANT)] == ["A"]
    assert uc.received_total(TENANT) == 10
    in_range = ReportsUseCase(store).orders_in_range(
        TENANT, datetime(2024, 1, 1, tzinfo=timezone.utc), datetime(2024, 1, 2, tzinfo=timezone.utc)
    )
    assert in_range == []
