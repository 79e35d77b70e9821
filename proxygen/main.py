import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proxygen.api import health_router, proxies_router
from proxygen.config import settings
from proxygen.models.failure import KnownError, create_unknown_failure
from proxygen.services.card_database import load_card_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler for startup/shutdown.

    Loads the reference store exactly once. Any failure propagates and
    aborts startup: the service cannot resolve cards without it.
    """
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app.state.reference_store = load_card_database(
        settings.card_database_path,
        strict=settings.strict_name_collisions,
        index_unsupported_layouts=settings.index_unsupported_layouts,
    )
    yield
    app.state.reference_store = None


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("proxygen"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(proxies_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Map a known failure to its status code and a known-failure envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


@app.exception_handler(Exception)
async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=create_unknown_failure(exc).model_dump(mode="json"),
    )
