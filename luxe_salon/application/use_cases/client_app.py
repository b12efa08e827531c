from __future__ import annotations

import logging

from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.ports.view import ViewPort
from luxe_salon.application.state.state_store import StateStore
from luxe_salon.application.use_cases.catalog import CatalogAccessor
from luxe_salon.application.use_cases.navigation import NavigationController
from luxe_salon.infrastructure.rendering.renderer import ViewRenderer


class ClientApp:
    """Composing root of the client.

    Owns the StateStore and routes each user event to the controller, then
    flushes the view's deferred queue so freshly rendered markup gets its
    handlers before the next event arrives.
    """

    def __init__(
        self,
        catalog: CatalogAccessor,
        renderer: ViewRenderer,
        view: ViewPort,
        booking_phone: str = "+91 1234567890",
        mobile_breakpoint: int = 992,
    ) -> None:
        self.state = StateStore()
        self._catalog = catalog
        self._renderer = renderer
        self._view = view
        self.controller = NavigationController(
            state=self.state,
            catalog=catalog,
            renderer=renderer,
            view=view,
            booking_phone=booking_phone,
            mobile_breakpoint=mobile_breakpoint,
        )
        self._logger = logging.getLogger(__name__)

    def start(self) -> bool:
        """Load the catalog and show home. Returns False if loading failed."""
        self._view.replace_content(self._renderer.loading())
        try:
            self._catalog.load()
        except LoadError as e:
            self._logger.error("Error initializing app", extra={"error": str(e)})
            self._view.replace_content(self._renderer.error_page(str(e)))
            self._view.defer(lambda: self._view.bind_retry(self.on_retry))
            self._view.flush()
            return False

        self.controller.show_home()
        self._view.mark_active_nav("home")
        self._view.show_gender(self.state.get_state().current_gender)
        self._view.flush()
        return True

    def on_retry(self) -> None:
        self._catalog.reset()
        self.state.reset()
        self.start()

    def on_nav_click(self, page: str) -> None:
        self.controller.navigate(page)
        self._view.flush()

    def on_service_click(self, service: str) -> None:
        self.controller.select_service(service)
        self._view.flush()

    def on_gender_click(self, gender: str) -> None:
        self.controller.switch_gender(gender)
        self._view.flush()

    def on_search_input(self, query: str) -> None:
        self.controller.search(query)
        self._view.flush()

    def on_category_click(self, category: str) -> None:
        self.controller.toggle_category(category)

    def on_sidebar_toggle(self) -> None:
        self.controller.toggle_sidebar()

    def on_book_nav_click(self) -> None:
        self.controller.request_booking()

    def on_resize(self) -> None:
        self.controller.resize()
