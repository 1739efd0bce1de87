from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RecordStorePort(ABC):
    """
    Per-tenant document storage.

    Records are flat dicts keyed by an opaque id inside a named collection
    (`inventory`, `orders`, `sales`, `staff`, `services`, `preferences`).
    Returned dicts always carry their id under the "id" key.
    """

    @abstractmethod
    def add(self, tenant_id: str, collection: str, data: dict[str, Any]) -> str:
        """Insert a record under a generated id. Returns the id."""
        raise NotImplementedError

    @abstractmethod
    def set(self, tenant_id: str, collection: str, record_id: str, data: dict[str, Any], merge: bool = False) -> None:
        """Write a record under a known id, replacing it unless `merge` is set."""
        raise NotImplementedError

    @abstractmethod
    def get(self, tenant_id: str, collection: str, record_id: str) -> dict[str, Any] | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, tenant_id: str, collection: str, record_id: str) -> bool:
        """Delete a record. Returns True if it existed."""
        raise NotImplementedError

    @abstractmethod
    def list(self, tenant_id: str, collection: str) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def query_range(self, tenant_id: str, collection: str, field: str, start: str, end: str) -> list[dict[str, Any]]:
        """Records whose `field` lies in the inclusive string range [start, end]."""
        raise NotImplementedError

    @abstractmethod
    def clear(self, tenant_id: str, collection: str) -> int:
        """Delete every record of a collection. Returns the number deleted."""
        raise NotImplementedError
