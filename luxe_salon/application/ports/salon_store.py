from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from luxe_salon.domain.entities.loyalty_card import LoyaltyCard
from luxe_salon.domain.entities.service import Service


class SalonStorePort(ABC):
    """Each mutating call is atomic: its read, check and write happen as one step."""

    @abstractmethod
    def list_services(self) -> list[Service]:
        """All services in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: int) -> Service | None:
        raise NotImplementedError

    @abstractmethod
    def add_service(self, build: Callable[[int], Service]) -> Service:
        """Store build(next_id), where next_id is the highest stored id + 1."""
        raise NotImplementedError

    @abstractmethod
    def update_service(self, service_id: int, apply: Callable[[Service], Service]) -> Service | None:
        """Replace a service with apply(current). Returns None if the id was not stored."""
        raise NotImplementedError

    @abstractmethod
    def delete_service(self, service_id: int) -> bool:
        """Remove a service. Returns False if the id was not stored."""
        raise NotImplementedError

    @abstractmethod
    def list_cards(self) -> list[LoyaltyCard]:
        raise NotImplementedError

    @abstractmethod
    def get_card(self, email: str) -> LoyaltyCard | None:
        raise NotImplementedError

    @abstractmethod
    def add_card(self, card: LoyaltyCard) -> bool:
        """Store a card unless its email is taken. Returns False on a duplicate."""
        raise NotImplementedError

    @abstractmethod
    def update_card(self, email: str, apply: Callable[[LoyaltyCard], LoyaltyCard]) -> LoyaltyCard | None:
        """Replace a card with apply(current). Returns None if the email was not stored."""
        raise NotImplementedError
