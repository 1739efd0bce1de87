"""
Tests for reporting aggregates over sales, orders and inventory.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.application.use_cases.reports import ReportsUseCase
from app.application.utils.dates import default_report_range
from app.infrastructure.store.memory_store import MemoryRecordStore

TENANT = "tenant-a"
NOW = datetime(2024, 1, 26, 9, 30, tzinfo=timezone.utc)


def build_reports() -> ReportsUseCase:
    store = MemoryRecordStore()
    sales = [
        ("Full Wash", "Omar", "2024-01-03T10:00:00.000Z", 25, 10),
        ("Full Wash", "Sami", "2024-01-10T10:00:00.000Z", 25, 10),
        ("Water Only", "Omar", "2024-01-20T10:00:00.000Z", 10, 4),
        ("Water Only", "Omar", "2023-12-20T10:00:00.000Z", 10, 4),
    ]
    for service, staff, date, amount, commission in sales:
        store.add(
            TENANT,
            "sales",
            {"service": service, "staffName": staff, "date": date, "amount": amount, "commission": commission},
        )
    store.add(TENANT, "orders", {"supplier": "A", "date": "2024-01-05T00:00:00.000Z", "status": "Received", "total": 30})
    store.add(TENANT, "orders", {"supplier": "B", "date": "2024-01-06T00:00:00.000Z", "status": "Pending", "total": 99})
    store.add(TENANT, "inventory", {"name": "Soap", "category": "Chemicals", "quantity": 3, "purchasePrice": 2})
    store.add(TENANT, "inventory", {"name": "Towels", "category": "Cloths", "quantity": 0, "purchasePrice": 1})
    return ReportsUseCase(store, low_stock_threshold=10, clock=lambda: NOW)


def test_default_range_is_month_to_date():
    start, end = default_report_range(NOW)
    assert start == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert end.date() == NOW.date()
    assert end.hour == 23


def test_sales_by_date_uses_default_range():
    sales = build_reports().sales_by_date(TENANT)
    assert [s.date[:10] for s in sales] == ["2024-01-20", "2024-01-10", "2024-01-03"]


def test_sales_by_service_shares():
    rows = {r.service: r for r in build_reports().sales_by_service(TENANT)}
    assert rows["Full Wash"].revenue == 50
    assert rows["Water Only"].revenue == 10
    assert rows["Full Wash"].share_percent == pytest.approx(83.333, rel=1e-3)


def test_sales_by_staff():
    rows = {r.staff_name: r for r in build_reports().sales_by_staff(TENANT)}
    assert rows["Omar"].sales == 35
    assert rows["Omar"].commission == 14
    assert rows["Sami"].sales == 25


def test_profit_loss_counts_received_orders_only():
    report = build_reports().profit_loss(TENANT)
    assert report.total_revenue == 60
    assert report.total_commission == 24
    assert report.total_order_cost == 30
    assert report.total_expenses == 54
    assert report.net_profit == 6


def test_explicit_range():
    reports = build_reports()
    start = datetime(2023, 12, 1, tzinfo=timezone.utc)
    end = datetime(2023, 12, 31, 23, 59, tzinfo=timezone.utc)
    assert [s.service for s in reports.sales_by_date(TENANT, start, end)] == ["Water Only"]
    assert reports.purchases_by_date(TENANT, start, end).total_cost == 0


def test_purchases_and_inventory():
    reports = build_reports()
    purchases = reports.purchases_by_date(TENANT)
    assert [o.supplier for o in purchases.orders] == ["A"]
    assert purchases.total_cost == 30

    rows = reports.inventory_report(TENANT)
    assert [(r.item.name, r.status, r.value) for r in rows] == [
        ("Soap", "low-stock", 6.0),
        ("Towels", "out-of-stock", 0.0),
    ]


def test_dashboard_summary():
    summary = build_reports().dashboard_summary(TENANT)
    assert summary.sales_count == 4
    assert summary.total_revenue == 70
    assert summary.total_inventory == 3
    assert summary.recent_sales[0].date.startswith("2024-01-20")
    assert [i.name for i in summary.low_stock_items] == ["Soap"]
