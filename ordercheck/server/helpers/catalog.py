"""Catalog snapshot resolution for the HTTP adapter."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from ...config import get_settings
from ...core.catalog import Catalog, load_catalog, sample_catalog, verify_catalog

logger = logging.getLogger("uvicorn.error")


def load_configured_catalog(catalog_path: str | None) -> Catalog:
    if not catalog_path:
        logger.info("CATALOG_PATH is not set; serving the built-in sample catalog.")
        return sample_catalog()

    catalog = load_catalog(Path(catalog_path))
    issues = verify_catalog(catalog)
    for issue in issues:
        logger.warning("Catalog issue [%s] %s", issue.code, issue.message)
    logger.info(
        "Loaded catalog %s: %d categories, %d products.",
        catalog_path,
        len(catalog.categories),
        len(catalog.products),
    )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_configured_catalog(get_settings().catalog_path)


__all__ = ["get_catalog", "load_configured_catalog"]
