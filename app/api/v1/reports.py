from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from app.application.use_cases.reports import REPORT_KINDS, ReportsUseCase
from app.wiring.dependencies import get_reports_use_case, get_tenant_id

router = APIRouter(prefix="/reports")


def _as_utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@router.get("/dashboard")
def dashboard(
    tenant_id: str = Depends(get_tenant_id),
    uc: ReportsUseCase = Depends(get_reports_use_case),
) -> dict[str, Any]:
    return asdict(uc.dashboard_summary(tenant_id))


@router.get("/{kind}")
def report(
    kind: str,
    start: datetime | None = None,
    end: datetime | None = None,
    tenant_id: str = Depends(get_tenant_id),
    uc: ReportsUseCase = Depends(get_reports_use_case),
) -> dict[str, Any]:
    if kind not in REPORT_KINDS:
        raise HTTPException(status_code=404, detail=f"Unknown report '{kind}'")
    start, end = _as_utc(start), _as_utc(end)
    if start and end and start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")

    if kind == "inventory":
        return {"kind": kind, "rows": [asdict(row) for row in uc.inventory_report(tenant_id)]}

    range_start, range_end = uc.resolve_range(start, end)
    body: dict[str, Any] = {"kind": kind, "start": range_start, "end": range_end}
    if kind == "sales-by-date":
        body["rows"] = [asdict(s) for s in uc.sales_by_date(tenant_id, start, end)]
    elif kind == "sales-by-service":
        body["rows"] = [asdict(r) for r in uc.sales_by_service(tenant_id, start, end)]
    elif kind == "sales-by-staff":
        body["rows"] = [asdict(r) for r in uc.sales_by_staff(tenant_id, start, end)]
    elif kind == "profit-loss":
        body["summary"] = asdict(uc.profit_loss(tenant_id, start, end))
    elif kind == "purchases-by-date":
        body.update(asdict(uc.purchases_by_date(tenant_id, start, end)))
    return body
