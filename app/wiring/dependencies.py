from functools import lru_cache
import logging

from fastapi import Depends, Header, HTTPException

from app.core.config import settings
from app.application.ports.record_store import RecordStorePort
from app.application.ports.service_catalog import ServiceCatalogPort
from app.application.use_cases.catalog_admin import CatalogAdminUseCase
from app.application.use_cases.inventory import InventoryUseCase
from app.application.use_cases.orders import OrdersUseCase
from app.application.use_cases.record_sale import RecordSaleUseCase
from app.application.use_cases.reports import ReportsUseCase
from app.application.use_cases.settings import SettingsUseCase
from app.application.use_cases.staff import StaffUseCase
from app.domain.entities.preferences import Preferences
from app.domain.entities.service_catalog import ServiceDefinition
from app.infrastructure.catalog.service_catalog_data import DEFAULT_SERVICES
from app.infrastructure.catalog.service_catalog_store import ServiceCatalogStore, service_from_document
from app.infrastructure.store.json_store import JsonRecordStore
from app.infrastructure.store.memory_store import MemoryRecordStore


_record_store: RecordStorePort | None = None

logger = logging.getLogger(__name__)


def _store_provider() -> str:
    provider = settings.STORE_PROVIDER.strip().lower()
    if provider:
        return provider
    return "json" if settings.ENV.lower() in {"dev", "local"} else "memory"


def get_record_store() -> RecordStorePort:
    global _record_store
    if _record_store is None:
        provider = _store_provider()
        if provider == "firestore":
            from app.infrastructure.store.firestore_store import FirestoreRecordStore, init_firestore_client

            client = init_firestore_client(settings.FIREBASE_CREDENTIALS_PATH, settings.FIREBASE_PROJECT_ID)
            _record_store = FirestoreRecordStore(client)
        elif provider == "json":
            _record_store = JsonRecordStore(data_dir=settings.DATA_DIR)
        elif provider == "memory":
            _record_store = MemoryRecordStore()
        else:
            raise ValueError(f"Unknown STORE_PROVIDER '{provider}'")
        logger.info("Record store initialised", extra={"reason": provider})
    return _record_store


def get_tenant_id(x_tenant_id: str | None = Header(None)) -> str:
    """Tenant comes from the identity layer in front of the service."""
    tenant_id = (x_tenant_id or "").strip()
    if not tenant_id:
        raise HTTPException(status_code=401, detail="X-Tenant-Id header is required")
    return tenant_id


@lru_cache
def default_services() -> tuple[ServiceDefinition, ...]:
    return tuple(service_from_document({"id": key, **doc}) for key, doc in DEFAULT_SERVICES.items())


def get_service_catalog(store: RecordStorePort = Depends(get_record_store)) -> ServiceCatalogPort:
    return ServiceCatalogStore(store)


def get_catalog_admin_use_case(
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
) -> CatalogAdminUseCase:
    return CatalogAdminUseCase(catalog=catalog, defaults=list(default_services()))


def get_record_sale_use_case(
    store: RecordStorePort = Depends(get_record_store),
    catalog: ServiceCatalogPort = Depends(get_service_catalog),
) -> RecordSaleUseCase:
    return RecordSaleUseCase(store=store, catalog=catalog)


def get_inventory_use_case(store: RecordStorePort = Depends(get_record_store)) -> InventoryUseCase:
    return InventoryUseCase(store=store, low_stock_threshold=settings.LOW_STOCK_THRESHOLD)


def get_orders_use_case(store: RecordStorePort = Depends(get_record_store)) -> OrdersUseCase:
    return OrdersUseCase(store=store)


def get_staff_use_case(store: RecordStorePort = Depends(get_record_store)) -> StaffUseCase:
    return StaffUseCase(store=store)


def get_reports_use_case(store: RecordStorePort = Depends(get_record_store)) -> ReportsUseCase:
    return ReportsUseCase(store=store, low_stock_threshold=settings.LOW_STOCK_THRESHOLD)


def get_settings_use_case(store: RecordStorePort = Depends(get_record_store)) -> SettingsUseCase:
    defaults = Preferences(currency_symbol=settings.DEFAULT_CURRENCY_SYMBOL, theme=settings.DEFAULT_THEME)
    return SettingsUseCase(store=store, defaults=defaults)
