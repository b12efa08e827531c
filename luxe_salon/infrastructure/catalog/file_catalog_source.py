from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.ports.catalog_source import CatalogSourcePort
from luxe_salon.core.config import settings


class FileCatalogSource(CatalogSourcePort):
    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path or settings.CATALOG_FILE)

    @property
    def path(self) -> Path:
        return self._path

    def fetch(self) -> Any:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LoadError(f"Failed to load services data from {self._path}: {e}") from e
