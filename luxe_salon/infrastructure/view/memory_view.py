from __future__ import annotations

import logging
import re
from typing import Callable

from luxe_salon.application.ports.view import ViewPort

_BOOKING_ID_RE = re.compile(r'class="btn-view" data-id="(\d+)"')


class MemoryView(ViewPort):
    """Headless stand-in for the browser page.

    Replacing the content drops every handler bound to the old markup, as a
    real innerHTML swap does. The click_* helpers simulate user clicks and
    only reach a handler that is bound to the current markup.
    """

    def __init__(self, width: int = 1280) -> None:
        self._width = width
        self.content = ""
        self.active_nav: str | None = "home"
        self.active_service: str | None = None
        self.gender: str | None = None
        self.sidebar_open = False
        self.open_category: str | None = None
        self.alerts: list[str] = []
        self._deferred: list[Callable[[], None]] = []
        self._booking_handler: Callable[[int], None] | None = None
        self._admin_handler: Callable[[], None] | None = None
        self._retry_handler: Callable[[], None] | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def width(self) -> int:
        return self._width

    def resize(self, width: int) -> None:
        self._width = width

    def replace_content(self, markup: str) -> None:
        self.content = markup
        self._booking_handler = None
        self._admin_handler = None
        self._retry_handler = None

    def defer(self, callback: Callable[[], None]) -> None:
        self._deferred.append(callback)

    def flush(self) -> None:
        while self._deferred:
            self._deferred.pop(0)()

    @property
    def pending(self) -> int:
        return len(self._deferred)

    def bind_booking_buttons(self, handler: Callable[[int], None]) -> None:
        if self.booking_ids():
            self._booking_handler = handler

    def bind_admin_access(self, handler: Callable[[], None]) -> None:
        if 'id="adminAccessBtn"' in self.content:
            self._admin_handler = handler

    def bind_retry(self, handler: Callable[[], None]) -> None:
        if 'id="retryBtn"' in self.content:
            self._retry_handler = handler

    def mark_active_nav(self, page: str) -> None:
        self.active_nav = page

    def mark_active_service(self, service: str | None) -> None:
        self.active_service = service

    def show_gender(self, gender: str) -> None:
        self.gender = gender

    def toggle_category(self, category: str) -> None:
        # One category open at a time; clicking the open one closes it
        self.open_category = None if self.open_category == category else category

    def toggle_sidebar(self) -> None:
        self.sidebar_open = not self.sidebar_open

    def close_sidebar(self) -> None:
        self.sidebar_open = False

    def alert(self, message: str) -> None:
        self._logger.info("Alert shown: %s", message.splitlines()[0] if message else "")
        self.alerts.append(message)

    def booking_ids(self) -> list[int]:
        return [int(m) for m in _BOOKING_ID_RE.findall(self.content)]

    def click_booking(self, service_id: int) -> bool:
        if self._booking_handler is None or service_id not in self.booking_ids():
            return False
        self._booking_handler(service_id)
        return True

    def click_admin_access(self) -> bool:
        if self._admin_handler is None:
            return False
        self._admin_handler()
        return True

    def click_retry(self) -> bool:
        if self._retry_handler is None:
            return False
        self._retry_handler()
        return True
