from __future__ import annotations

from dataclasses import dataclass

PAGES = ("home", "services", "loyalty", "admin")


@dataclass(frozen=True)
class UIState:
    current_gender: str = "women"  # "women" | "men"
    current_page: str = "home"  # one of PAGES
    current_service: str | None = None  # category slug, e.g. "hair-cut"
    search_query: str = ""
