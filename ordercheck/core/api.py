"""Stable public API facade for the ordercheck core engine."""


from collections.abc import Iterable

from .catalog import Catalog, CatalogSource, load_catalog
from .validate import ValidationResult, check_order
from .validate.orders import OrderLine


def validate_order(order: Iterable[OrderLine], catalog: CatalogSource) -> ValidationResult:
    """Check ``order`` against an explicit catalog snapshot."""
    resolved: Catalog = load_catalog(catalog)
    return check_order(order, resolved.products, resolved.categories)


__all__ = ["validate_order"]
