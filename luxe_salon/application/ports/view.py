from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable


class ViewPort(ABC):
    """The page the client draws into.

    Markup handed to replace_content carries no handlers; anything clickable
    inside it must be bound again once the new nodes exist, which is why
    binding goes through defer().
    """

    @property
    @abstractmethod
    def width(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def replace_content(self, markup: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def defer(self, callback: Callable[[], None]) -> None:
        """Run callback after the current event has finished rendering."""
        raise NotImplementedError

    @abstractmethod
    def flush(self) -> None:
        """Run every deferred callback queued so far, in order."""
        raise NotImplementedError

    @abstractmethod
    def bind_booking_buttons(self, handler: Callable[[int], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def bind_admin_access(self, handler: Callable[[], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def bind_retry(self, handler: Callable[[], None]) -> None:
        raise NotImplementedError

    @abstractmethod
    def mark_active_nav(self, page: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def mark_active_service(self, service: str | None) -> None:
        raise NotImplementedError

    @abstractmethod
    def show_gender(self, gender: str) -> None:
        """Highlight the gender tab and show that gender's sidebar menu."""
        raise NotImplementedError

    @abstractmethod
    def toggle_category(self, category: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def toggle_sidebar(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def close_sidebar(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def alert(self, message: str) -> None:
        raise NotImplementedError
