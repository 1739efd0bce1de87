from __future__ import annotations

import copy
import uuid
from typing import Any

from app.application.ports.record_store import RecordStorePort


class MemoryRecordStore(RecordStorePort):
    def __init__(self) -> None:
        self._collections: dict[tuple[str, str], dict[str, dict[str, Any]]] = {}

    def _bucket(self, tenant_id: str, collection: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault((tenant_id, collection), {})

    def add(self, tenant_id: str, collection: str, data: dict[str, Any]) -> str:
        record_id = uuid.uuid4().hex
        self.set(tenant_id, collection, record_id, data)
        return record_id

    def set(self, tenant_id: str, collection: str, record_id: str, data: dict[str, Any], merge: bool = False) -> None:
        bucket = self._bucket(tenant_id, collection)
        payload = {k: copy.deepcopy(v) for k, v in data.items() if k != "id"}
        if merge and record_id in bucket:
            bucket[record_id].update(payload)
        else:
            bucket[record_id] = payload

    def get(self, tenant_id: str, collection: str, record_id: str) -> dict[str, Any] | None:
        record = self._bucket(tenant_id, collection).get(record_id)
        if record is None:
            return None
        return {"id": record_id, **copy.deepcopy(record)}

    def delete(self, tenant_id: str, collection: str, record_id: str) -> bool:
        return self._bucket(tenant_id, collection).pop(record_id, None) is not None

    def list(self, tenant_id: str, collection: str) -> list[dict[str, Any]]:
        return [
            {"id": record_id, **copy.deepcopy(record)}
            for record_id, record in self._bucket(tenant_id, collection).items()
        ]

    def query_range(self, tenant_id: str, collection: str, field: str, start: str, end: str) -> list[dict[str, Any]]:
        return [
            record
            for record in self.list(tenant_id, collection)
            if isinstance(record.get(field), str) and start <= record[field] <= end
        ]

    def clear(self, tenant_id: str, collection: str) -> int:
        bucket = self._bucket(tenant_id, collection)
        count = len(bucket)
        bucket.clear()
        return count
