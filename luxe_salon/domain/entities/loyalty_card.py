from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Tier(str, Enum):
    bronze = "Bronze"
    silver = "Silver"
    gold = "Gold"
    platinum = "Platinum"


# (minimum points, tier), highest first
TIER_THRESHOLDS: tuple[tuple[int, Tier], ...] = (
    (1000, Tier.platinum),
    (500, Tier.gold),
    (200, Tier.silver),
    (0, Tier.bronze),
)


def tier_for_points(points: int) -> Tier:
    for minimum, tier in TIER_THRESHOLDS:
        if points >= minimum:
            return tier
    return Tier.bronze


@dataclass(frozen=True)
class LoyaltyCard:
    id: int
    name: str
    email: str
    phone: str | None = None
    points: int = 0
    visits: int = 0
    total_spent: float = 0
    tier: Tier = Tier.bronze
    created_at: str | None = None
    last_updated: str | None = None

    def with_deltas(self, points: int, visits: int, spent: float, updated_at: str) -> "LoyaltyCard":
        """Return a copy with the deltas added and the tier recomputed."""
        new_points = self.points + points
        return LoyaltyCard(
            id=self.id,
            name=self.name,
            email=self.email,
            phone=self.phone,
            points=new_points,
            visits=self.visits + visits,
            total_spent=self.total_spent + spent,
            tier=tier_for_points(new_points),
            created_at=self.created_at,
            last_updated=updated_at,
        )

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "LoyaltyCard":
        points = int(data.get("points") or 0)
        return LoyaltyCard(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data["email"]),
            phone=data.get("phone"),
            points=points,
            visits=int(data.get("visits") or 0),
            total_spent=data.get("totalSpent") or 0,
            tier=tier_for_points(points),
            created_at=data.get("createdAt"),
            last_updated=data.get("lastUpdated"),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "points": self.points,
            "visits": self.visits,
            "totalSpent": self.total_spent,
            "tier": self.tier.value,
            "createdAt": self.created_at,
        }
        if self.last_updated is not None:
            result["lastUpdated"] = self.last_updated
        return result
