from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.service_catalog import ServiceDefinition


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self, tenant_id: str) -> list[ServiceDefinition]:
        """All valid services of a tenant ordered by display order."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, tenant_id: str, service_id: str) -> ServiceDefinition | None:
        raise NotImplementedError

    @abstractmethod
    def save_service(self, tenant_id: str, service: ServiceDefinition) -> None:
        raise NotImplementedError

    def snapshot(self, tenant_id: str) -> dict[str, ServiceDefinition]:
        """Current catalog keyed by service id, as read by the pricing resolver."""
        return {service.id: service for service in self.list_services(tenant_id)}
