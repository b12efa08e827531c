import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from luxe_salon.api.pages import router as pages_router
from luxe_salon.api.responses import error_response
from luxe_salon.api.v1.categories import router as categories_router
from luxe_salon.api.v1.loyalty_cards import router as loyalty_cards_router
from luxe_salon.api.v1.services import router as services_router
from luxe_salon.core.config import settings
from luxe_salon.wiring.dependencies import get_salon_store


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("service_id", "email", "tier", "gender", "page", "count", "status", "error"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seeds the data file when the json store is in use
    get_salon_store()
    logger.info("Salon services API running on port %s (ENV=%s)", settings.PORT, settings.ENV)
    yield


app = FastAPI(title="Salon Services API", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return error_response(422, "; ".join(messages) or "Invalid request")


app.include_router(services_router, tags=["services"])
app.include_router(loyalty_cards_router, tags=["loyalty-cards"])
app.include_router(categories_router, tags=["categories"])
app.include_router(pages_router, tags=["pages"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
