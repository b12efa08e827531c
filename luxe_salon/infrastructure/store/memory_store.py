from __future__ import annotations

import threading
from typing import Callable

from luxe_salon.application.ports.salon_store import SalonStorePort
from luxe_salon.domain.entities.loyalty_card import LoyaltyCard
from luxe_salon.domain.entities.service import Service


class MemorySalonStore(SalonStorePort):
    """Keyed-record store: services indexed by id, cards by email."""

    def __init__(self) -> None:
        self._services: dict[int, Service] = {}
        self._cards: dict[str, LoyaltyCard] = {}
        self._lock = threading.Lock()

    def list_services(self) -> list[Service]:
        return list(self._services.values())

    def get_service(self, service_id: int) -> Service | None:
        return self._services.get(service_id)

    def add_service(self, build: Callable[[int], Service]) -> Service:
        with self._lock:
            service = build(max(self._services, default=0) + 1)
            self._services[service.id] = service
            return service

    def update_service(self, service_id: int, apply: Callable[[Service], Service]) -> Service | None:
        with self._lock:
            current = self._services.get(service_id)
            if current is None:
                return None
            updated = apply(current)
            self._services[service_id] = updated
            return updated

    def delete_service(self, service_id: int) -> bool:
        with self._lock:
            return self._services.pop(service_id, None) is not None

    def list_cards(self) -> list[LoyaltyCard]:
        return list(self._cards.values())

    def get_card(self, email: str) -> LoyaltyCard | None:
        return self._cards.get(email)

    def add_card(self, card: LoyaltyCard) -> bool:
        with self._lock:
            if card.email in self._cards:
                return False
            self._cards[card.email] = card
            return True

    def update_card(self, email: str, apply: Callable[[LoyaltyCard], LoyaltyCard]) -> LoyaltyCard | None:
        with self._lock:
            current = self._cards.get(email)
            if current is None:
                return None
            updated = apply(current)
            self._cards[email] = updated
            return updated
