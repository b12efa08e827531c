from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from luxe_salon.application.exceptions import ConflictError, NotFoundError
from luxe_salon.application.ports.salon_store import SalonStorePort
from luxe_salon.domain.entities.loyalty_card import LoyaltyCard, Tier, tier_for_points


class LoyaltyUseCase:
    def __init__(
        self,
        store: SalonStorePort,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._clock = clock
        self._logger = logging.getLogger(__name__)

    def _now_iso(self) -> str:
        ts = datetime.fromtimestamp(self._clock(), tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def list_cards(self) -> list[LoyaltyCard]:
        return self._store.list_cards()

    def get_card(self, email: str) -> LoyaltyCard:
        card = self._store.get_card(email)
        if card is None:
            raise NotFoundError("Loyalty card not found")
        return card

    def register(self, name: str, email: str, phone: str | None = None) -> LoyaltyCard:
        card = LoyaltyCard(
            id=int(self._clock() * 1000),
            name=name,
            email=email,
            phone=phone,
            points=0,
            visits=0,
            total_spent=0,
            tier=Tier.bronze,
            created_at=self._now_iso(),
        )
        if not self._store.add_card(card):
            self._logger.info("Duplicate loyalty registration", extra={"email": email})
            raise ConflictError("Card already exists")

        self._logger.info("Loyalty card created", extra={"email": email})
        return card

    def record_activity(
        self,
        email: str,
        add_points: int = 0,
        add_visits: int = 0,
        add_spent: float = 0,
    ) -> LoyaltyCard:
        """Add the deltas to a card and recompute its tier from the new points."""
        updated = self._store.update_card(
            email,
            lambda card: card.with_deltas(add_points, add_visits, add_spent, self._now_iso()),
        )
        if updated is None:
            raise NotFoundError("Card not found")

        if updated.tier != tier_for_points(updated.points - add_points):
            self._logger.info("Loyalty tier changed", extra={"email": email, "tier": updated.tier.value})
        return updated
