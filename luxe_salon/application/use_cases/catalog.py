from __future__ import annotations

import logging
from typing import Any

from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.ports.catalog_source import CatalogSourcePort
from luxe_salon.domain.entities.service import GENDERS, Service

Catalog = dict[str, dict[str, list[Service]]]


def _empty_catalog() -> Catalog:
    return {gender: {} for gender in GENDERS}


class CatalogAccessor:
    """Read-only access to the gender -> category -> services catalog.

    The document is fetched once per session. A failed load leaves an empty
    catalog cached and re-raises, so the caller can show an error view.
    """

    def __init__(self, source: CatalogSourcePort) -> None:
        self._source = source
        self._catalog: Catalog | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    def load(self) -> Catalog:
        if self._catalog is not None:
            return self._catalog

        try:
            document = self._source.fetch()
            self._catalog = self._parse(document)
        except LoadError as e:
            self._logger.error("Error loading services", extra={"error": str(e)})
            self._catalog = _empty_catalog()
            raise

        self._logger.info(
            "Services data loaded",
            extra={"count": sum(len(self.all_services_for(g)) for g in GENDERS)},
        )
        return self._catalog

    def reset(self) -> None:
        """Forget the cached document so the next load() fetches again."""
        self._catalog = None

    def all_services_for(self, gender: str) -> list[Service]:
        services: list[Service] = []
        for category_services in self._data().get(gender, {}).values():
            services.extend(category_services)
        return services

    def find_by_id(self, service_id: int) -> Service | None:
        for gender in GENDERS:
            for service in self.all_services_for(gender):
                if service.id == service_id:
                    return service
        return None

    def search(self, query: str, gender: str) -> list[Service]:
        needle = query.lower()
        return [
            s
            for s in self.all_services_for(gender)
            if needle in s.name.lower() or needle in s.description.lower()
        ]

    def by_category(self, gender: str, category: str) -> list[Service]:
        return list(self._data().get(gender, {}).get(category, []))

    def has_category(self, gender: str, category: str) -> bool:
        return category in self._data().get(gender, {})

    def categories_for(self, gender: str) -> list[str]:
        return list(self._data().get(gender, {}).keys())

    def _data(self) -> Catalog:
        if self._catalog is None:
            self._logger.warning("Services data not loaded yet")
            return _empty_catalog()
        return self._catalog

    @staticmethod
    def _parse(document: Any) -> Catalog:
        if not isinstance(document, dict) or any(document.get(g) is None for g in GENDERS):
            raise LoadError("Invalid services data structure")

        catalog: Catalog = {}
        for gender in GENDERS:
            categories = document[gender]
            if not isinstance(categories, dict):
                raise LoadError("Invalid services data structure")
            catalog[gender] = {}
            for category, entries in categories.items():
                # Non-list values are skipped, the same as an empty category
                if not isinstance(entries, list):
                    continue
                try:
                    catalog[gender][category] = [
                        Service.from_dict(entry, gender=gender, category=category) for entry in entries
                    ]
                except (KeyError, TypeError, ValueError) as e:
                    raise LoadError(f"Invalid service entry in {gender}/{category}: {e}") from e
        return catalog
