from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogSourcePort(ABC):
    @abstractmethod
    def fetch(self) -> Any:
        """Fetch and parse the catalog document.

        Raises LoadError when the document cannot be retrieved or parsed.
        Shape validation is left to the caller.
        """
        raise NotImplementedError
