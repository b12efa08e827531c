import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from luxe_salon.domain.entities.loyalty_card import LoyaltyCard, Tier
from luxe_salon.domain.entities.service import Service

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class Gender(str, Enum):
    women = "women"
    men = "men"


class ServiceSchema(BaseModel):
    id: int
    name: str
    category: str
    subcategory: str
    gender: Gender
    description: str
    price: float
    duration: str
    image: str | None = None
    popular: bool = False

    @staticmethod
    def from_entity(service: Service) -> "ServiceSchema":
        return ServiceSchema(
            id=service.id,
            name=service.name,
            category=service.category,
            subcategory=service.subcategory,
            gender=Gender(service.gender),
            description=service.description,
            price=service.price,
            duration=service.duration,
            image=service.image,
            popular=service.popular,
        )


class ServiceCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    category: str
    subcategory: str = ""
    gender: Gender
    description: str = ""
    price: float = Field(ge=0)
    duration: str = ""
    image: str | None = None
    popular: bool = False


class ServiceUpdateSchema(BaseModel):
    # Unknown keys (including "id") are dropped; the id comes from the path
    model_config = ConfigDict(extra="ignore")

    name: str | None = Field(default=None, min_length=1)
    category: str | None = None
    subcategory: str | None = None
    gender: Gender | None = None
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    duration: str | None = None
    image: str | None = None
    popular: bool | None = None

    # Omitting a field keeps it; only image may be cleared with null
    @field_validator("name", "category", "subcategory", "gender", "description", "price", "duration", "popular")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class LoyaltyCardSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    email: str
    phone: str | None = None
    points: int
    visits: int
    total_spent: float
    tier: Tier
    created_at: str | None = None
    last_updated: str | None = None

    @staticmethod
    def from_entity(card: LoyaltyCard) -> "LoyaltyCardSchema":
        return LoyaltyCardSchema(
            id=card.id,
            name=card.name,
            email=card.email,
            phone=card.phone,
            points=card.points,
            visits=card.visits,
            total_spent=card.total_spent,
            tier=card.tier,
            created_at=card.created_at,
            last_updated=card.last_updated,
        )


class LoyaltyCardCreateSchema(BaseModel):
    name: str = Field(min_length=1)
    email: str
    phone: str | None = None

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        value = value.strip()
        if not _EMAIL_RE.match(value):
            raise ValueError("invalid email address")
        return value


class LoyaltyCardUpdateSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    add_points: int = Field(default=0, ge=0, alias="addPoints")
    add_visits: int = Field(default=0, ge=0, alias="addVisits")
    add_spent: float = Field(default=0, ge=0, alias="addSpent")


class ServiceResponse(BaseModel):
    success: bool = True
    data: ServiceSchema


class ServiceListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[ServiceSchema]


class LoyaltyCardResponse(BaseModel):
    success: bool = True
    data: LoyaltyCardSchema


class LoyaltyCardListResponse(BaseModel):
    success: bool = True
    count: int
    data: list[LoyaltyCardSchema]


class NameListResponse(BaseModel):
    success: bool = True
    data: list[str]


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
