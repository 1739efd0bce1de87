from __future__ import annotations

from dataclasses import dataclass, field

from app.domain.entities.inventory import InventoryItem
from app.domain.entities.order import Order
from app.domain.entities.sale import SaleRecord


@dataclass(frozen=True)
class ServiceRevenue:
    service: str
    revenue: float
    share_percent: float


@dataclass(frozen=True)
class StaffPerformance:
    staff_name: str
    sales: float
    commission: float


@dataclass(frozen=True)
class ProfitLoss:
    total_revenue: float
    total_commission: float
    total_order_cost: float
    total_expenses: float
    net_profit: float


@dataclass(frozen=True)
class PurchasesReport:
    orders: list[Order]
    total_cost: float


@dataclass(frozen=True)
class InventoryReportRow:
    item: InventoryItem
    status: str
    value: float


@dataclass(frozen=True)
class DashboardSummary:
    total_revenue: float
    sales_count: int
    total_inventory: int
    recent_sales: list[SaleRecord] = field(default_factory=list)
    low_stock_items: list[InventoryItem] = field(default_factory=list)
