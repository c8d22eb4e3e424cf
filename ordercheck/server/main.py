"""FastAPI server adapter for the ordercheck core engine."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env before importing modules that may resolve/capture settings.
ROOT_DIR = Path(__file__).resolve().parents[2]
load_dotenv(ROOT_DIR / ".env")

from ..config import get_settings
from ..core.errors import CatalogError
from .helpers.catalog import get_catalog
from .routers import api

settings = get_settings()
logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)


async def _invalid_request_body(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def _unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app() -> FastAPI:
    # The configured catalog is loaded once here; a broken file stops startup.
    try:
        catalog = get_catalog()
    except CatalogError:
        logger.exception("Cannot load catalog from %s", get_settings().catalog_path)
        raise
    logger.info("Serving %d products.", len(catalog.products))

    fastapi_app = FastAPI(
        title=settings.app_name,
        summary="Check product orders against catalog dependency rules",
        version="1.0.0",
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allow_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    fastapi_app.add_exception_handler(RequestValidationError, _invalid_request_body)
    fastapi_app.add_exception_handler(Exception, _unexpected_error)
    fastapi_app.include_router(api.router)
    return fastapi_app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("ordercheck.server.main:app", host="0.0.0.0", port=8000, reload=settings.debug)


__all__ = ["app", "create_app", "logger", "run", "settings"]
