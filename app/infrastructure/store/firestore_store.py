from __future__ import annotations

import logging
from typing import Any

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from app.application.ports.record_store import RecordStorePort

_BATCH_LIMIT = 500


def init_firestore_client(credentials_path: str | None = None, project_id: str | None = None):
    """Initialise the default Firebase app once and return a Firestore client."""
    if not firebase_admin._apps:
        options = {"projectId": project_id} if project_id else None
        if credentials_path:
            cred = credentials.Certificate(credentials_path)
        else:
            cred = credentials.ApplicationDefault()
        firebase_admin.initialize_app(cred, options)
    return firestore.client()


class FirestoreRecordStore(RecordStorePort):
    """Documents live under users/{tenant_id}/{collection}/{record_id}."""

    def __init__(self, client) -> None:
        self._db = client
        self._logger = logging.getLogger(__name__)

    def _collection(self, tenant_id: str, collection: str):
        return self._db.collection("users").document(tenant_id).collection(collection)

    def add(self, tenant_id: str, collection: str, data: dict[str, Any]) -> str:
        payload = {k: v for k, v in data.items() if k != "id"}
        _, doc_ref = self._collection(tenant_id, collection).add(payload)
        return doc_ref.id

    def set(self, tenant_id: str, collection: str, record_id: str, data: dict[str, Any], merge: bool = False) -> None:
        payload = {k: v for k, v in data.items() if k != "id"}
        self._collection(tenant_id, collection).document(record_id).set(payload, merge=merge)

    def get(self, tenant_id: str, collection: str, record_id: str) -> dict[str, Any] | None:
        snap = self._collection(tenant_id, collection).document(record_id).get()
        if not snap.exists:
            return None
        return {"id": snap.id, **(snap.to_dict() or {})}

    def delete(self, tenant_id: str, collection: str, record_id: str) -> bool:
        doc_ref = self._collection(tenant_id, collection).document(record_id)
        if not doc_ref.get().exists:
            return False
        doc_ref.delete()
        return True

    def list(self, tenant_id: str, collection: str) -> list[dict[str, Any]]:
        return [{"id": d.id, **(d.to_dict() or {})} for d in self._collection(tenant_id, collection).stream()]

    def query_range(self, tenant_id: str, collection: str, field: str, start: str, end: str) -> list[dict[str, Any]]:
        query = (
            self._collection(tenant_id, collection)
            .where(filter=FieldFilter(field, ">=", start))
            .where(filter=FieldFilter(field, "<=", end))
        )
        return [{"id": d.id, **(d.to_dict() or {})} for d in query.stream()]

    def clear(self, tenant_id: str, collection: str) -> int:
        deleted = 0
        batch = self._db.batch()
        pending = 0
        for snap in self._collection(tenant_id, collection).stream():
            batch.delete(snap.reference)
            pending += 1
            deleted += 1
            if pending == _BATCH_LIMIT:
                batch.commit()
                batch = self._db.batch()
                pending = 0
        if pending:
            batch.commit()
        self._logger.info("Collection cleared", extra={"tenant_id": tenant_id, "reason": f"{collection}:{deleted}"})
        return deleted
