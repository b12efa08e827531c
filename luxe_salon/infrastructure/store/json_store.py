from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable

from luxe_salon.application.exceptions import StorageError
from luxe_salon.application.ports.salon_store import SalonStorePort
from luxe_salon.domain.entities.loyalty_card import LoyaltyCard
from luxe_salon.domain.entities.service import Service


class JsonSalonStore(SalonStorePort):
    """Services and loyalty cards kept in one JSON document.

    Every call reads the whole file, and every mutation rewrites it. The lock
    makes each read-check-write step atomic inside this process; two
    processes sharing the file are last-write-wins.
    """

    def __init__(self, data_file: str | Path = "./data/services.json") -> None:
        self._data_file = Path(data_file)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)
        self.ensure_data_file()

    @property
    def data_file(self) -> Path:
        return self._data_file

    def ensure_data_file(self) -> None:
        """Seed an empty document if the file does not exist yet."""
        with self._lock:
            if self._data_file.exists():
                return
            try:
                self._data_file.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Cannot create data directory: {e}") from e
            self._save_data({"services": [], "loyaltyCards": []})
            self._logger.info("Seeded empty data file at %s", self._data_file)

    def _load_data(self) -> dict[str, Any]:
        """Load the full document. Missing top-level arrays default to empty."""
        try:
            with open(self._data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {"services": [], "loyaltyCards": []}
        except (json.JSONDecodeError, OSError) as e:
            self._logger.error("Error reading data", extra={"error": str(e)})
            raise StorageError(f"Error reading data: {e}") from e

        if not isinstance(data, dict):
            raise StorageError("Error reading data: document is not an object")
        return {
            "services": data.get("services") or [],
            "loyaltyCards": data.get("loyaltyCards") or [],
        }

    def _save_data(self, data: dict[str, Any]) -> None:
        """Save the document atomically via a temp file and rename."""
        temp_path = self._data_file.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._data_file)
        except (OSError, TypeError, ValueError) as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    self._logger.warning("Could not remove temp file %s", temp_path)
            self._logger.error("Error writing data", extra={"error": str(e)})
            raise StorageError(f"Error writing data: {e}") from e

    def _services(self, data: dict[str, Any]) -> list[Service]:
        try:
            return [Service.from_dict(s) for s in data["services"]]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt service record: {e}") from e

    def _cards(self, data: dict[str, Any]) -> list[LoyaltyCard]:
        try:
            return [LoyaltyCard.from_dict(c) for c in data["loyaltyCards"]]
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Corrupt loyalty card record: {e}") from e

    def list_services(self) -> list[Service]:
        with self._lock:
            return self._services(self._load_data())

    def get_service(self, service_id: int) -> Service | None:
        for service in self.list_services():
            if service.id == service_id:
                return service
        return None

    def add_service(self, build: Callable[[int], Service]) -> Service:
        with self._lock:
            data = self._load_data()
            next_id = max((s.id for s in self._services(data)), default=0) + 1
            service = build(next_id)
            data["services"].append(service.to_dict())
            self._save_data(data)
            return service

    def update_service(self, service_id: int, apply: Callable[[Service], Service]) -> Service | None:
        with self._lock:
            data = self._load_data()
            for i, service in enumerate(self._services(data)):
                if service.id == service_id:
                    updated = apply(service)
                    data["services"][i] = updated.to_dict()
                    self._save_data(data)
                    return updated
            return None

    def delete_service(self, service_id: int) -> bool:
        with self._lock:
            data = self._load_data()
            before = len(data["services"])
            data["services"] = [s for s in data["services"] if s.get("id") != service_id]
            if len(data["services"]) == before:
                return False
            self._save_data(data)
            return True

    def list_cards(self) -> list[LoyaltyCard]:
        with self._lock:
            return self._cards(self._load_data())

    def get_card(self, email: str) -> LoyaltyCard | None:
        for card in self.list_cards():
            if card.email == email:
                return card
        return None

    def add_card(self, card: LoyaltyCard) -> bool:
        with self._lock:
            data = self._load_data()
            if any(c.email == card.email for c in self._cards(data)):
                return False
            data["loyaltyCards"].append(card.to_dict())
            self._save_data(data)
            return True

    def update_card(self, email: str, apply: Callable[[LoyaltyCard], LoyaltyCard]) -> LoyaltyCard | None:
        with self._lock:
            data = self._load_data()
            for i, card in enumerate(self._cards(data)):
                if card.email == email:
                    updated = apply(card)
                    data["loyaltyCards"][i] = updated.to_dict()
                    self._save_data(data)
                    return updated
            return None
