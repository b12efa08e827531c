from __future__ import annotations

import logging

from luxe_salon.application.ports.view import ViewPort
from luxe_salon.application.state.state_store import StateStore
from luxe_salon.application.use_cases.catalog import CatalogAccessor
from luxe_salon.application.utils.formatting import format_currency, format_service_title
from luxe_salon.domain.entities.service import Service
from luxe_salon.domain.entities.ui_state import PAGES
from luxe_salon.infrastructure.rendering.renderer import ViewRenderer


class NavigationController:
    """Turns user actions into state changes and re-rendered views.

    Each transition updates the StateStore, replaces the view content, queues
    handler binding for the new markup and marks the active nav/sidebar entry.
    """

    def __init__(
        self,
        state: StateStore,
        catalog: CatalogAccessor,
        renderer: ViewRenderer,
        view: ViewPort,
        booking_phone: str = "+91 1234567890",
        mobile_breakpoint: int = 992,
    ) -> None:
        self._state = state
        self._catalog = catalog
        self._renderer = renderer
        self._view = view
        self._booking_phone = booking_phone
        self._mobile_breakpoint = mobile_breakpoint
        self._logger = logging.getLogger(__name__)

    def navigate(self, page: str) -> None:
        if page not in PAGES:
            self._logger.info("Unknown page, showing home", extra={"page": page})
            page = "home"

        if page == "services":
            self.show_all_services()
        elif page == "loyalty":
            self.show_loyalty()
        elif page == "admin":
            self.show_admin()
        else:
            self.show_home()

        self._view.mark_active_nav(page)

    def show_home(self) -> None:
        self._state.set_page("home")
        self._state.set_service(None)
        self._view.replace_content(self._renderer.home_page())

    def show_all_services(self) -> None:
        self._state.set_page("services")
        self._state.set_service(None)
        services = self._catalog.all_services_for(self._state.get_state().current_gender)
        self._show_grid(services, "All Services")
        self._view.mark_active_service(None)

    def show_service(self, service: str) -> None:
        self._state.set_page("services")
        self._state.set_service(service)
        gender = self._state.get_state().current_gender
        services = self._catalog.by_category(gender, service)
        self._show_grid(services, format_service_title(service))
        self._view.mark_active_service(service)

    def show_loyalty(self) -> None:
        self._state.set_page("loyalty")
        self._state.set_service(None)
        self._view.replace_content(self._renderer.loyalty_page())

    def show_admin(self) -> None:
        self._state.set_page("admin")
        self._state.set_service(None)
        self._view.replace_content(self._renderer.admin_page())
        self._view.defer(lambda: self._view.bind_admin_access(self.request_admin_access))

    def select_service(self, service: str) -> None:
        """Sidebar click on a service slug."""
        self.show_service(service)
        self._view.mark_active_nav("services")
        self._close_sidebar_on_mobile()

    def switch_gender(self, gender: str) -> None:
        self._state.set_gender(gender)
        self._view.show_gender(gender)

        current = self._state.get_state().current_service
        if current and self._catalog.has_category(gender, current):
            self.show_service(current)
        else:
            self.show_all_services()

    def search(self, query: str) -> None:
        self._state.set_search_query(query)

        if not query.strip():
            # Cleared search box: back to what was shown before typing
            current = self._state.get_state().current_service
            if current:
                self.show_service(current)
            else:
                self.show_all_services()
            return

        gender = self._state.get_state().current_gender
        results = self._catalog.search(query, gender)
        self._show_grid(results, f'Search Results for "{query}"')

    def resize(self) -> None:
        if self._view.width >= self._mobile_breakpoint:
            self._view.close_sidebar()

    def toggle_category(self, category: str) -> None:
        self._view.toggle_category(category)

    def toggle_sidebar(self) -> None:
        self._view.toggle_sidebar()

    def show_service_details(self, service_id: int) -> None:
        service = self._catalog.find_by_id(service_id)
        if service is None:
            return
        self._view.alert(
            f"Booking: {service.name}\n"
            f"Price: {format_currency(service.price)}\n"
            f"Duration: {service.duration}\n\n"
            f"Please call {self._booking_phone} to confirm your appointment."
        )

    def request_booking(self) -> None:
        self._view.alert(f"Booking system coming soon! Please call us at {self._booking_phone}")

    def request_admin_access(self) -> None:
        self._view.alert("Please contact your administrator for access credentials.")

    def _show_grid(self, services: list[Service], title: str) -> None:
        self._view.replace_content(self._renderer.services_grid(services, title))
        self._view.defer(lambda: self._view.bind_booking_buttons(self.show_service_details))

    def _close_sidebar_on_mobile(self) -> None:
        if self._view.width < self._mobile_breakpoint:
            self._view.close_sidebar()
