from __future__ import annotations

import logging

from app.application.dto.records import preferences_from_document, preferences_to_document
from app.application.ports.record_store import RecordStorePort
from app.domain.entities.preferences import Preferences

PREFERENCES_COLLECTION = "preferences"
PREFERENCES_DOC_ID = "display"

TENANT_DATA_COLLECTIONS = ("inventory", "orders", "sales", "staff", "services")


class SettingsUseCase:
    """Per-tenant display preferences and destructive data maintenance."""

    def __init__(self, store: RecordStorePort, defaults: Preferences) -> None:
        self._store = store
        self._defaults = defaults
        self._logger = logging.getLogger(__name__)

    def get_preferences(self, tenant_id: str) -> Preferences:
        doc = self._store.get(tenant_id, PREFERENCES_COLLECTION, PREFERENCES_DOC_ID)
        return preferences_from_document(doc, self._defaults)

    def update_preferences(
        self,
        tenant_id: str,
        currency_symbol: str | None = None,
        theme: str | None = None,
    ) -> Preferences:
        if theme is not None and theme not in {"light", "dark"}:
            raise ValueError("Theme must be 'light' or 'dark'")
        current = self.get_preferences(tenant_id)
        updated = Preferences(
            currency_symbol=(currency_symbol or "").strip() or current.currency_symbol,
            theme=theme or current.theme,
        )
        self._store.set(tenant_id, PREFERENCES_COLLECTION, PREFERENCES_DOC_ID, preferences_to_document(updated))
        return updated

    def clear_data(self, tenant_id: str) -> dict[str, int]:
        """Delete every record of the tenant's business collections. Returns counts per collection."""
        deleted = {name: self._store.clear(tenant_id, name) for name in TENANT_DATA_COLLECTIONS}
        self._logger.warning(
            "Tenant data cleared",
            extra={"tenant_id": tenant_id, "reason": ",".join(f"{k}={v}" for k, v in deleted.items())},
        )
        return deleted
