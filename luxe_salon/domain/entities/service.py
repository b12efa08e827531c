from __future__ import annotations

from dataclasses import dataclass
from typing import Any

GENDERS = ("women", "men")


@dataclass(frozen=True)
class Service:
    id: int
    name: str
    description: str = ""
    category: str = ""
    subcategory: str = ""
    gender: str = "women"
    price: float = 0
    duration: str = ""
    image: str | None = None
    icon: str | None = None
    popular: bool = False

    @staticmethod
    def from_dict(data: dict[str, Any], gender: str | None = None, category: str | None = None) -> "Service":
        """Build a Service from a stored record or a catalog entry.

        Catalog entries omit gender and category (they are implied by where
        the entry sits in the document), so callers pass them in.
        """
        return Service(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
            category=str(data.get("category") or category or ""),
            subcategory=str(data.get("subcategory") or ""),
            gender=str(data.get("gender") or gender or "women"),
            price=data.get("price") or 0,
            duration=str(data.get("duration") or ""),
            image=data.get("image"),
            icon=data.get("icon"),
            popular=data.get("popular") is True,
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "subcategory": self.subcategory,
            "gender": self.gender,
            "description": self.description,
            "price": self.price,
            "duration": self.duration,
            "image": self.image,
            "popular": self.popular,
        }
        if self.icon is not None:
            result["icon"] = self.icon
        return result
