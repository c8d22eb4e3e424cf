"""Order validation helper for the HTTP adapter."""

from __future__ import annotations

import json
import logging
from typing import Any

from ...config import get_settings
from ...core.catalog import Catalog
from ...core.validate import ValidationResult, check_order

logger = logging.getLogger("uvicorn.error")


def run_validate_order(order: list[dict[str, Any]], catalog: Catalog) -> ValidationResult:
    result = check_order(order, catalog.products, catalog.categories)
    logger.debug(
        "Validated order with %d item(s): valid=%s, %d error(s).",
        len(order),
        result.valid,
        len(result.errors),
    )
    if not result.valid and get_settings().log_verbosity == "high":
        logger.debug(
            "Order validation errors:\n%s",
            json.dumps([error.to_dict() for error in result.errors], ensure_ascii=False, indent=2),
        )
    return result


__all__ = ["run_validate_order"]
