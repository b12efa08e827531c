from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from luxe_salon.application.utils.formatting import format_currency, format_service_title
from luxe_salon.domain.entities.service import Service

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dataclass(frozen=True)
class TierBenefit:
    name: str
    icon: str
    min_spend: int
    max_spend: int | None
    discount_percent: int
    perk: str


# Spend bands shown on the loyalty explainer page
LOYALTY_TIERS: tuple[TierBenefit, ...] = (
    TierBenefit("Bronze", "🥉", 0, 10000, 5, "Basic rewards on all services"),
    TierBenefit("Silver", "🥈", 10001, 25000, 10, "Priority booking + special offers"),
    TierBenefit("Gold", "🥇", 25001, 50000, 15, "Free add-ons + birthday treats"),
    TierBenefit("Platinum", "💎", 50001, None, 20, "VIP perks + exclusive events"),
)


def build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = format_currency
    env.filters["title_from_slug"] = format_service_title
    return env


class ViewRenderer:
    """Pure page renderers: data in, markup string out."""

    def __init__(self, business_name: str = "Luxe Salon", env: Environment | None = None) -> None:
        self._business_name = business_name
        self._env = env or build_environment()

    def _render(self, template: str, **context: object) -> str:
        return self._env.get_template(template).render(business_name=self._business_name, **context)

    def home_page(self) -> str:
        return self._render("home.html")

    def loyalty_page(self) -> str:
        return self._render("loyalty.html", tiers=LOYALTY_TIERS)

    def admin_page(self) -> str:
        return self._render("admin.html")

    def services_grid(self, services: Sequence[Service], title: str) -> str:
        return self._render("services_grid.html", services=list(services), title=title)

    def service_card(self, service: Service) -> str:
        return self._render("service_card.html", service=service)

    def loading(self) -> str:
        return self._render("loading.html")

    def error_page(self, message: str) -> str:
        return self._render("error.html", message=message)

    def shell(self, categories: dict[str, list[str]], gender: str = "women") -> str:
        """The SPA shell: nav, gender tabs, sidebar and an empty content area."""
        return self._render("index.html", categories=categories, gender=gender)
