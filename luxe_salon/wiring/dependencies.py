from functools import lru_cache
import logging

from luxe_salon.core.config import settings
from luxe_salon.application.ports.salon_store import SalonStorePort
from luxe_salon.application.use_cases.catalog import CatalogAccessor
from luxe_salon.application.use_cases.client_app import ClientApp
from luxe_salon.application.use_cases.loyalty import LoyaltyUseCase
from luxe_salon.application.use_cases.services import ServiceAdminUseCase
from luxe_salon.infrastructure.catalog.file_catalog_source import FileCatalogSource
from luxe_salon.infrastructure.catalog.http_catalog_source import HttpCatalogSource
from luxe_salon.infrastructure.rendering.renderer import ViewRenderer
from luxe_salon.infrastructure.store.json_store import JsonSalonStore
from luxe_salon.infrastructure.store.memory_store import MemorySalonStore
from luxe_salon.infrastructure.view.memory_view import MemoryView


_salon_store: SalonStorePort | None = None


def get_salon_store() -> SalonStorePort:
    global _salon_store
    if _salon_store is None:
        logger = logging.getLogger(__name__)
        if settings.STORE_PROVIDER.lower() == "memory":
            logger.info("Using MemorySalonStore")
            _salon_store = MemorySalonStore()
        else:
            logger.info("Using JsonSalonStore at %s", settings.DATA_FILE)
            _salon_store = JsonSalonStore(data_file=settings.DATA_FILE)
    return _salon_store


def get_service_admin_use_case() -> ServiceAdminUseCase:
    return ServiceAdminUseCase(
        store=get_salon_store(),
        default_image=settings.DEFAULT_SERVICE_IMAGE,
    )


def get_loyalty_use_case() -> LoyaltyUseCase:
    return LoyaltyUseCase(store=get_salon_store())


@lru_cache
def get_renderer() -> ViewRenderer:
    return ViewRenderer(business_name=settings.BUSINESS_NAME)


def get_catalog_file_source() -> FileCatalogSource:
    return FileCatalogSource(settings.CATALOG_FILE)


def build_client(base_url: str | None = None, view: MemoryView | None = None) -> ClientApp:
    """Wire a headless client that fetches the catalog over HTTP."""
    return ClientApp(
        catalog=CatalogAccessor(HttpCatalogSource(base_url=base_url)),
        renderer=get_renderer(),
        view=view or MemoryView(),
        booking_phone=settings.BOOKING_PHONE,
        mobile_breakpoint=settings.MOBILE_BREAKPOINT,
    )
