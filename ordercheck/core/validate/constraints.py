"""Property constraint matching for dependency candidates."""


from collections.abc import Iterable, Mapping
from typing import Any

from ..canonical.entities import Product, PropertyConstraint


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def satisfies_constraint(value: Any, constraint: PropertyConstraint) -> bool:
    """Return whether a single property value passes ``constraint``.

    Values are never coerced: ``"true"`` is not a boolean and ``True`` is not
    a number. A missing value (``None``) and unknown kinds always fail.
    """
    kind = constraint.kind
    if kind == "number":
        if not _is_number(value):
            return False
        if constraint.min is not None and value < constraint.min:
            return False
        if constraint.max is not None and value > constraint.max:
            return False
        return True

    if kind == "boolean":
        if not isinstance(value, bool):
            return False
        if constraint.value is not None and value is not constraint.value:
            return False
        return True

    if kind == "enum":
        if not isinstance(value, str):
            return False
        if constraint.enum_values and value not in constraint.enum_values:
            return False
        return True

    return False


def properties_match(properties: Mapping[str, Any], constraints: Iterable[PropertyConstraint]) -> bool:
    return all(satisfies_constraint(properties.get(c.key), c) for c in constraints)


def product_matches(product: Product, constraints: Iterable[PropertyConstraint]) -> bool:
    return properties_match(product.properties, constraints)


__all__ = ["product_matches", "properties_match", "satisfies_constraint"]
