from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

from luxe_salon.domain.entities.ui_state import UIState

Listener = Callable[[str, Any, UIState], None]


class StateStore:
    """Holds the client's UIState and notifies subscribers on change.

    Setters are no-ops when the value is unchanged. Listeners are called
    synchronously in registration order with (event, new_value, snapshot).
    """

    def __init__(self, initial: UIState | None = None) -> None:
        self._state = initial or UIState()
        self._listeners: list[Listener] = []
        self._logger = logging.getLogger(__name__)

    def get_state(self) -> UIState:
        return self._state

    def set_gender(self, gender: str) -> None:
        self._update("current_gender", gender, "genderChanged")

    def set_page(self, page: str) -> None:
        self._update("current_page", page, "pageChanged")

    def set_service(self, service: str | None) -> None:
        self._update("current_service", service, "serviceChanged")

    def set_search_query(self, query: str) -> None:
        self._update("search_query", query, "searchChanged")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            self._listeners = [l for l in self._listeners if l is not listener]

        return unsubscribe

    def reset(self) -> None:
        self._state = UIState()
        self._notify("reset", None)

    def _update(self, field: str, value: Any, event: str) -> None:
        if getattr(self._state, field) == value:
            return
        self._state = replace(self._state, **{field: value})
        self._logger.debug("State changed: %s=%r", field, value)
        self._notify(event, value)

    def _notify(self, event: str, value: Any) -> None:
        # Copy so a listener may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(event, value, self._state)
