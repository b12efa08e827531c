from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any

from luxe_salon.application.exceptions import NotFoundError
from luxe_salon.application.ports.salon_store import SalonStorePort
from luxe_salon.domain.entities.service import Service

_SERVICE_FIELDS = {f.name for f in fields(Service)} - {"id"}


@dataclass(frozen=True)
class ServiceFilter:
    gender: str | None = None
    category: str | None = None
    subcategory: str | None = None
    popular: bool = False

    def matches(self, service: Service) -> bool:
        if self.gender and service.gender != self.gender:
            return False
        if self.category and service.category != self.category:
            return False
        if self.subcategory and service.subcategory != self.subcategory:
            return False
        if self.popular and not service.popular:
            return False
        return True


def _distinct(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


class ServiceAdminUseCase:
    def __init__(self, store: SalonStorePort, default_image: str = "images/default.jpg") -> None:
        self._store = store
        self._default_image = default_image
        self._logger = logging.getLogger(__name__)

    def list_services(self, service_filter: ServiceFilter | None = None) -> list[Service]:
        service_filter = service_filter or ServiceFilter()
        return [s for s in self._store.list_services() if service_filter.matches(s)]

    def get_service(self, service_id: int) -> Service:
        service = self._store.get_service(service_id)
        if service is None:
            raise NotFoundError("Service not found")
        return service

    def create_service(self, payload: dict[str, Any]) -> Service:
        """Create a service with id = highest existing id + 1.

        Ids freed by deletes are never handed out again unless the highest
        id itself was deleted.
        """
        values = {k: v for k, v in payload.items() if k in _SERVICE_FIELDS}
        values["image"] = values.get("image") or self._default_image
        values["popular"] = values.get("popular") is True

        service = self._store.add_service(lambda next_id: Service(id=next_id, **values))
        self._logger.info("Service created", extra={"service_id": service.id})
        return service

    def update_service(self, service_id: int, changes: dict[str, Any]) -> Service:
        values = {k: v for k, v in changes.items() if k in _SERVICE_FIELDS}
        updated = self._store.update_service(service_id, lambda current: replace(current, **values))
        if updated is None:
            raise NotFoundError("Service not found")
        self._logger.info("Service updated", extra={"service_id": service_id})
        return updated

    def delete_service(self, service_id: int) -> None:
        if not self._store.delete_service(service_id):
            raise NotFoundError("Service not found")
        self._logger.info("Service deleted", extra={"service_id": service_id})

    def list_categories(self, gender: str | None = None) -> list[str]:
        services = self.list_services(ServiceFilter(gender=gender))
        return _distinct([s.category for s in services])

    def list_subcategories(self, category: str, gender: str | None = None) -> list[str]:
        services = self.list_services(ServiceFilter(gender=gender, category=category))
        return _distinct([s.subcategory for s in services])
