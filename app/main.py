import logging

from fastapi import FastAPI

from app.api.v1.inventory import router as inventory_router
from app.api.v1.orders import router as orders_router
from app.api.v1.reports import router as reports_router
from app.api.v1.sales import router as sales_router
from app.api.v1.services import router as services_router
from app.api.v1.settings import router as settings_router
from app.api.v1.staff import router as staff_router
from app.core.config import settings


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("tenant_id", "service_id", "sale_id", "order_id", "payment_method", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=settings.APP_NAME, version="1.0.0")

app.include_router(services_router, prefix="/api/v1", tags=["services"])
app.include_router(sales_router, prefix="/api/v1", tags=["sales"])
app.include_router(inventory_router, prefix="/api/v1", tags=["inventory"])
app.include_router(orders_router, prefix="/api/v1", tags=["orders"])
app.include_router(staff_router, prefix="/api/v1", tags=["staff"])
app.include_router(reports_router, prefix="/api/v1", tags=["reports"])
app.include_router(settings_router, prefix="/api/v1", tags=["settings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
