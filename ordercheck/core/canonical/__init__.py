from .entities import (
    CategoryDefinition,
    OrderItem,
    Product,
    ProductDependency,
    PropertyConstraint,
    PropertyDefinition,
    PropertyKind,
    PropertyValue,
)

__all__ = [
    "CategoryDefinition",
    "OrderItem",
    "Product",
    "ProductDependency",
    "PropertyConstraint",
    "PropertyDefinition",
    "PropertyKind",
    "PropertyValue",
]
