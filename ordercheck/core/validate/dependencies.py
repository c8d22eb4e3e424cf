"""Pooled-quantity check of a single product dependency."""


from collections.abc import Mapping
from dataclasses import dataclass

from ..canonical.entities import Product, ProductDependency
from .constraints import product_matches


@dataclass(frozen=True)
class OrderedProduct:
    product: Product
    quantity: int


@dataclass(frozen=True)
class DependencyCheck:
    satisfied: bool
    found: int
    reason: str | None = None


def matching_quantity(dependency: ProductDependency, ordered: Mapping[str, OrderedProduct]) -> int:
    """Sum the quantities of every ordered product that can count toward ``dependency``.

    The product declaring the dependency is not excluded; it counts toward its
    own dependency whenever it matches the target category and constraints.
    """
    total = 0
    for entry in ordered.values():
        if entry.product.category_id != dependency.category_id:
            continue
        if not product_matches(entry.product, dependency.property_constraints):
            continue
        total += entry.quantity
    return total


def unmet_reason(dependency: ProductDependency, found: int) -> str:
    suffix = " with specific constraints" if dependency.is_constrained else ""
    return (
        f"Requires at least {dependency.min_count} product(s) from category "
        f'"{dependency.category_id}"{suffix}, but only {found} found'
    )


def check_dependency(dependency: ProductDependency, ordered: Mapping[str, OrderedProduct]) -> DependencyCheck:
    found = matching_quantity(dependency, ordered)
    if found >= dependency.min_count:
        return DependencyCheck(satisfied=True, found=found)
    return DependencyCheck(satisfied=False, found=found, reason=unmet_reason(dependency, found))


__all__ = [
    "DependencyCheck",
    "OrderedProduct",
    "check_dependency",
    "matching_quantity",
    "unmet_reason",
]
