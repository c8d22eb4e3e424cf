"""Order configuration checker.

The check runs in two phases. Resolution rejects unknown product ids and
non-positive quantities; if it reports anything the dependency phase is
skipped. Otherwise every dependency of every ordered product is evaluated
against the pooled order, and all unmet dependencies are reported.
"""


from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..canonical.entities import CategoryDefinition, OrderItem, Product
from .dependencies import OrderedProduct, check_dependency
from .report import ValidationError, ValidationResult

OrderLine = OrderItem | Mapping[str, Any]


def _as_order_item(line: OrderLine) -> OrderItem:
    if isinstance(line, OrderItem):
        return line
    if not isinstance(line, Mapping):
        return OrderItem(
            product_id=str(getattr(line, "product_id", "")),
            quantity=getattr(line, "quantity", 0),
        )
    return OrderItem.from_dict(dict(line))


def _is_positive_quantity(quantity: Any) -> bool:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return False
    return quantity > 0


def resolve_order(
    order: Iterable[OrderLine],
    products: Iterable[Product],
) -> tuple[dict[str, OrderedProduct], list[ValidationError]]:
    """Map ordered product ids to catalog products.

    Each line yields at most one error: a not-found error wins over a
    quantity error. Lines with errors are left out of the resolved map.
    """
    catalog = {product.id: product for product in products}
    ordered: dict[str, OrderedProduct] = {}
    errors: list[ValidationError] = []

    for line in order:
        item = _as_order_item(line)
        product = catalog.get(item.product_id)
        if product is None:
            errors.append(
                ValidationError(
                    product_id=item.product_id,
                    message=f'Product "{item.product_id}" not found',
                )
            )
            continue
        if not _is_positive_quantity(item.quantity):
            errors.append(
                ValidationError(
                    product_id=item.product_id,
                    message="Quantity must be greater than 0",
                )
            )
            continue
        ordered[item.product_id] = OrderedProduct(product=product, quantity=item.quantity)

    return ordered, errors


def check_dependencies(ordered: Mapping[str, OrderedProduct]) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for product_id, entry in ordered.items():
        for dependency in entry.product.dependencies:
            result = check_dependency(dependency, ordered)
            if result.satisfied:
                continue
            errors.append(
                ValidationError(
                    product_id=product_id,
                    message=(
                        f'Product "{entry.product.name}" (quantity: {entry.quantity}) '
                        f"has unmet dependency: {result.reason}"
                    ),
                )
            )
    return errors


def check_order(
    order: Iterable[OrderLine],
    products: Iterable[Product],
    categories: Sequence[CategoryDefinition] = (),
) -> ValidationResult:
    """Validate an order against the dependency rules of its products.

    ``categories`` is accepted so callers can pass the full catalog snapshot;
    dependency matching only needs the products themselves.
    """
    ordered, errors = resolve_order(order, products)
    if errors:
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult.from_errors(check_dependencies(ordered))


__all__ = ["OrderLine", "check_dependencies", "check_order", "resolve_order"]
