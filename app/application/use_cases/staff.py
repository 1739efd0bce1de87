from __future__ import annotations

from app.application.dto.records import staff_from_documents
from app.application.exceptions import NotFoundError
from app.application.ports.record_store import RecordStorePort
from app.domain.entities.staff import StaffMember

STAFF_COLLECTION = "staff"


class StaffUseCase:
    def __init__(self, store: RecordStorePort) -> None:
        self._store = store

    def add_staff(self, tenant_id: str, name: str) -> StaffMember:
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValueError("Staff name is required")
        staff_id = self._store.add(tenant_id, STAFF_COLLECTION, {"name": cleaned})
        return StaffMember(id=staff_id, name=cleaned)

    def list_staff(self, tenant_id: str) -> list[StaffMember]:
        members = staff_from_documents(self._store.list(tenant_id, STAFF_COLLECTION))
        return sorted(members, key=lambda m: m.name.lower())

    def delete_staff(self, tenant_id: str, staff_id: str) -> None:
        if not self._store.delete(tenant_id, STAFF_COLLECTION, staff_id):
            raise NotFoundError(f"Staff member '{staff_id}' not found")
