from __future__ import annotations

import json
import logging
import re
import threading
import uuid
from pathlib import Path
from typing import Any

from app.application.ports.record_store import RecordStorePort

_SAFE_NAME = re.compile(r"[^A-Za-z0-9_.-]")


class JsonRecordStore(RecordStorePort):
    """One JSON file per tenant collection: {data_dir}/{tenant_id}/{collection}.json."""

    def __init__(self, data_dir: str = "./data/tenants") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[tuple[str, str], threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, tenant_id: str, collection: str) -> threading.Lock:
        """Get or create a lock for a tenant collection."""
        key = (tenant_id, collection)
        with self._lock_lock:
            if key not in self._locks:
                self._locks[key] = threading.Lock()
            return self._locks[key]

    def _get_file_path(self, tenant_id: str, collection: str) -> Path:
        return self._data_dir / _SAFE_NAME.sub("_", tenant_id) / f"{_SAFE_NAME.sub('_', collection)}.json"

    def _load(self, tenant_id: str, collection: str) -> dict[str, dict[str, Any]]:
        """Load collection records. A corrupted file is moved aside and the collection starts empty."""
        file_path = self._get_file_path(tenant_id, collection)
        if not file_path.exists():
            return {}
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError:
            self._quarantine(tenant_id, file_path)
            return {}
        records = data.get("records") if isinstance(data, dict) else None
        if not isinstance(records, dict):
            self._quarantine(tenant_id, file_path)
            return {}
        return records

    def _quarantine(self, tenant_id: str, file_path: Path) -> Path:
        """Keep an unreadable file next to the collection instead of overwriting it."""
        corrupt_path = file_path.with_name(f"{file_path.name}.{uuid.uuid4().hex[:8]}.corrupt")
        file_path.replace(corrupt_path)
        self._logger.error(
            "Corrupted collection file moved aside, starting empty",
            extra={"tenant_id": tenant_id, "reason": str(corrupt_path)},
        )
        return corrupt_path

    def _save(self, tenant_id: str, collection: str, records: dict[str, dict[str, Any]]) -> None:
        """Save collection records atomically."""
        file_path = self._get_file_path(tenant_id, collection)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"version": 1, "records": records}, f, indent=2, ensure_ascii=False)
            # Atomic rename
            temp_path.replace(file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def add(self, tenant_id: str, collection: str, data: dict[str, Any]) -> str:
        record_id = uuid.uuid4().hex
        self.set(tenant_id, collection, record_id, data)
        return record_id

    def set(self, tenant_id: str, collection: str, record_id: str, data: dict[str, Any], merge: bool = False) -> None:
        payload = {k: v for k, v in data.items() if k != "id"}
        with self._get_lock(tenant_id, collection):
            records = self._load(tenant_id, collection)
            if merge and record_id in records:
                records[record_id].update(payload)
            else:
                records[record_id] = payload
            self._save(tenant_id, collection, records)

    def get(self, tenant_id: str, collection: str, record_id: str) -> dict[str, Any] | None:
        with self._get_lock(tenant_id, collection):
            record = self._load(tenant_id, collection).get(record_id)
        if record is None:
            return None
        return {"id": record_id, **record}

    def delete(self, tenant_id: str, collection: str, record_id: str) -> bool:
        with self._get_lock(tenant_id, collection):
            records = self._load(tenant_id, collection)
            if record_id not in records:
                return False
            del records[record_id]
            self._save(tenant_id, collection, records)
            return True

    def list(self, tenant_id: str, collection: str) -> list[dict[str, Any]]:
        with self._get_lock(tenant_id, collection):
            records = self._load(tenant_id, collection)
        return [{"id": record_id, **record} for record_id, record in records.items()]

    def query_range(self, tenant_id: str, collection: str, field: str, start: str, end: str) -> list[dict[str, Any]]:
        return [
            record
            for record in self.list(tenant_id, collection)
            if isinstance(record.get(field), str) and start <= record[field] <= end
        ]

    def clear(self, tenant_id: str, collection: str) -> int:
        with self._get_lock(tenant_id, collection):
            records = self._load(tenant_id, collection)
            if records:
                self._save(tenant_id, collection, {})
            return len(records)
