from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse

from luxe_salon.api.responses import error_response
from luxe_salon.application.exceptions import LoadError
from luxe_salon.application.use_cases.catalog import CatalogAccessor
from luxe_salon.domain.entities.service import GENDERS
from luxe_salon.infrastructure.catalog.file_catalog_source import FileCatalogSource
from luxe_salon.infrastructure.rendering.renderer import ViewRenderer
from luxe_salon.wiring.dependencies import get_catalog_file_source, get_renderer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
def index(
    source: FileCatalogSource = Depends(get_catalog_file_source),
    renderer: ViewRenderer = Depends(get_renderer),
):
    catalog = CatalogAccessor(source)
    try:
        catalog.load()
    except LoadError as e:
        # The shell still renders; the client reports the load failure itself
        logger.warning("Shell rendered without catalog", extra={"error": str(e)})

    categories = {gender: catalog.categories_for(gender) for gender in GENDERS}
    return HTMLResponse(renderer.shell(categories))


@router.get("/services.json")
def services_catalog(source: FileCatalogSource = Depends(get_catalog_file_source)):
    if not source.path.is_file():
        return error_response(404, "Catalog not found")
    return FileResponse(source.path, media_type="application/json")
