from __future__ import annotations

from datetime import datetime
from typing import Callable

from app.application.dto.records import inventory_from_documents, orders_from_documents, sales_from_documents
from app.application.ports.record_store import RecordStorePort
from app.application.utils.dates import default_report_range, to_iso, utc_now
from app.domain.entities.order import Order, OrderStatus
from app.domain.entities.report import (
    DashboardSummary,
    InventoryReportRow,
    ProfitLoss,
    PurchasesReport,
    ServiceRevenue,
    StaffPerformance,
)
from app.domain.entities.sale import SaleRecord

REPORT_KINDS = (
    "sales-by-date",
    "sales-by-service",
    "sales-by-staff",
    "profit-loss",
    "purchases-by-date",
    "inventory",
)


class ReportsUseCase:
    def __init__(
        self,
        store: RecordStorePort,
        low_stock_threshold: int = 10,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._low_stock_threshold = low_stock_threshold
        self._clock = clock

    def resolve_range(self, start: datetime | None, end: datetime | None) -> tuple[str, str]:
        default_start, default_end = default_report_range(self._clock())
        return to_iso(start or default_start), to_iso(end or default_end)

    def sales_in_range(self, tenant_id: str, start: datetime | None = None, end: datetime | None = None) -> list[SaleRecord]:
        lo, hi = self.resolve_range(start, end)
        docs = self._store.query_range(tenant_id, "sales", "date", lo, hi)
        return sales_from_documents(docs)

    def orders_in_range(self, tenant_id: str, start: datetime | None = None, end: datetime | None = None) -> list[Order]:
        lo, hi = self.resolve_range(start, end)
        docs = self._store.query_range(tenant_id, "orders", "date", lo, hi)
        return orders_from_documents(docs)

    def sales_by_date(self, tenant_id: str, start: datetime | None = None, end: datetime | None = None) -> list[SaleRecord]:
        return sorted(self.sales_in_range(tenant_id, start, end), key=lambda s: s.date, reverse=True)

    def sales_by_service(
        self, tenant_id: str, start: datetime | None = None, end: datetime | None = None
    ) -> list[ServiceRevenue]:
        revenue: dict[str, float] = {}
        for sale in self.sales_in_range(tenant_id, start, end):
            revenue[sale.service] = revenue.get(sale.service, 0.0) + sale.amount
        total = sum(revenue.values())
        return [
            ServiceRevenue(
                service=name,
                revenue=value,
                share_percent=(value / total * 100) if total else 0.0,
            )
            for name, value in revenue.items()
        ]

    def sales_by_staff(
        self, tenant_id: str, start: datetime | None = None, end: datetime | None = None
    ) -> list[StaffPerformance]:
        totals: dict[str, list[float]] = {}
        for sale in self.sales_in_range(tenant_id, start, end):
            bucket = totals.setdefault(sale.staff_name, [0.0, 0.0])
            bucket[0] += sale.amount
            bucket[1] += sale.commission
        return [
            StaffPerformance(staff_name=name, sales=values[0], commission=values[1])
            for name, values in totals.items()
        ]

    def profit_loss(self, tenant_id: str, start: datetime | None = None, end: datetime | None = None) -> ProfitLoss:
        sales = self.sales_in_range(tenant_id, start, end)
        orders = self.orders_in_range(tenant_id, start, end)
        total_revenue = sum(s.amount for s in sales)
        total_commission = sum(s.commission for s in sales)
        total_order_cost = sum(o.total for o in orders if o.status == OrderStatus.RECEIVED)
        total_expenses = total_commission + total_order_cost
        return ProfitLoss(
            total_revenue=total_revenue,
            total_commission=total_commission,
            total_order_cost=total_order_cost,
            total_expenses=total_expenses,
            net_profit=total_revenue - total_expenses,
        )

    def purchases_by_date(
        self, tenant_id: str, start: datetime | None = None, end: datetime | None = None
    ) -> PurchasesReport:
        received = [o for o in self.orders_in_range(tenant_id, start, end) if o.status == OrderStatus.RECEIVED]
        received.sort(key=lambda o: o.date, reverse=True)
        return PurchasesReport(orders=received, total_cost=sum(o.total for o in received))

    def inventory_report(self, tenant_id: str) -> list[InventoryReportRow]:
        items = inventory_from_documents(self._store.list(tenant_id, "inventory"))
        items.sort(key=lambda item: item.name.lower())
        return [
            InventoryReportRow(
                item=item,
                status=item.status(self._low_stock_threshold).value,
                value=item.stock_value,
            )
            for item in items
        ]

    def dashboard_summary(self, tenant_id: str) -> DashboardSummary:
        sales = sorted(
            sales_from_documents(self._store.list(tenant_id, "sales")),
            key=lambda s: s.date,
            reverse=True,
        )
        items = inventory_from_documents(self._store.list(tenant_id, "inventory"))
        low_stock = [item for item in items if 0 < item.quantity < self._low_stock_threshold]
        return DashboardSummary(
            total_revenue=sum(s.amount for s in sales),
            sales_count=len(sales),
            total_inventory=sum(item.quantity for item in items),
            recent_sales=sales[:5],
            low_stock_items=low_stock[:5],
        )
