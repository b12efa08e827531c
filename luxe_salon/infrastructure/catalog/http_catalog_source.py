from __future__ import annotations

import logging
from typing import Any

import httpx

from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.ports.catalog_source import CatalogSourcePort
from luxe_salon.core.config import settings


class HttpCatalogSource(CatalogSourcePort):
    def __init__(self, base_url: str | None = None, client: httpx.Client | None = None) -> None:
        self._base_url = (base_url or settings.CLIENT_BASE_URL).rstrip("/")
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def fetch(self) -> Any:
        url = f"{self._base_url}/services.json"
        try:
            resp = self._client.get(url)
        except httpx.HTTPError as e:
            raise LoadError(f"Failed to load services data: {e}") from e

        if resp.status_code >= 400:
            self._logger.error(
                "Catalog fetch failed",
                extra={"status": resp.status_code, "url": url},
            )
            raise LoadError(f"Failed to load services data: {resp.status_code} {resp.reason_phrase}")

        try:
            return resp.json()
        except ValueError as e:
            raise LoadError(f"Services data is not valid JSON: {e}") from e
