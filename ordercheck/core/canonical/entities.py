from dataclasses import dataclass, field
from typing import Any, Literal

from ..errors import CatalogError

PropertyKind = Literal["number", "boolean", "enum"]
PropertyValue = bool | int | float | str


@dataclass(frozen=True)
class PropertyDefinition:
    key: str
    label: str
    kind: PropertyKind | str
    required: bool = False
    min: float | None = None
    max: float | None = None
    enum_values: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "PropertyDefinition":
        data = _require_mapping(payload, "property definition")
        return cls(
            key=_require_str(data, "key"),
            label=_optional_str(data.get("label")) or _require_str(data, "key"),
            kind=_require_str(data, "kind"),
            required=bool(data.get("required") or False),
            min=_optional_number(data, "min"),
            max=_optional_number(data, "max"),
            enum_values=_optional_strings(data, "enumValues"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "kind": self.kind,
            "required": self.required,
        }
        _put_bounds(data, self.min, self.max, self.enum_values)
        return data


@dataclass(frozen=True)
class CategoryDefinition:
    id: str
    name: str
    properties: tuple[PropertyDefinition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))

    @classmethod
    def from_dict(cls, payload: Any) -> "CategoryDefinition":
        data = _require_mapping(payload, "category")
        category_id = _require_str(data, "id")
        properties = tuple(
            PropertyDefinition.from_dict(item)
            for item in _optional_list(data, "properties")
        )
        seen: set[str] = set()
        for prop in properties:
            if prop.key in seen:
                raise CatalogError(f'Category "{category_id}" defines property "{prop.key}" more than once')
            seen.add(prop.key)
        return cls(
            id=category_id,
            name=_optional_str(data.get("name")) or category_id,
            properties=properties,
        )

    def find_property(self, key: str) -> PropertyDefinition | None:
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "properties": [prop.to_dict() for prop in self.properties],
        }


@dataclass(frozen=True)
class PropertyConstraint:
    key: str
    kind: PropertyKind | str
    min: float | None = None
    max: float | None = None
    value: bool | None = None
    enum_values: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, payload: Any) -> "PropertyConstraint":
        data = _require_mapping(payload, "property constraint")
        value = data.get("value")
        if value is not None and not isinstance(value, bool):
            raise CatalogError(f'Constraint "{data.get("key")}" value must be a boolean')
        return cls(
            key=_require_str(data, "key"),
            kind=_require_str(data, "kind"),
            min=_optional_number(data, "min"),
            max=_optional_number(data, "max"),
            value=value,
            enum_values=_optional_strings(data, "enumValues"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"key": self.key, "kind": self.kind}
        _put_bounds(data, self.min, self.max, None)
        if self.value is not None:
            data["value"] = self.value
        if self.enum_values is not None:
            data["enumValues"] = list(self.enum_values)
        return data


@dataclass(frozen=True)
class ProductDependency:
    category_id: str
    min_count: int
    property_constraints: tuple[PropertyConstraint, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "property_constraints", tuple(self.property_constraints or ()))

    @property
    def is_constrained(self) -> bool:
        return bool(self.property_constraints)

    @classmethod
    def from_dict(cls, payload: Any) -> "ProductDependency":
        data = _require_mapping(payload, "dependency")
        min_count = data.get("minCount")
        if isinstance(min_count, bool) or not isinstance(min_count, int) or min_count < 1:
            raise CatalogError(
                f'Dependency on "{data.get("categoryId")}" must declare a positive integer minCount'
            )
        return cls(
            category_id=_require_str(data, "categoryId"),
            min_count=min_count,
            property_constraints=tuple(
                PropertyConstraint.from_dict(item)
                for item in _optional_list(data, "propertyConstraints")
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"categoryId": self.category_id, "minCount": self.min_count}
        if self.property_constraints:
            data["propertyConstraints"] = [c.to_dict() for c in self.property_constraints]
        return data


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    category_id: str
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    dependencies: tuple[ProductDependency, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "dependencies", tuple(self.dependencies or ()))

    @classmethod
    def from_dict(cls, payload: Any) -> "Product":
        data = _require_mapping(payload, "product")
        properties = data.get("properties") or {}
        if not isinstance(properties, dict):
            raise CatalogError(f'Product "{data.get("id")}" properties must be an object')
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            category_id=_require_str(data, "categoryId"),
            properties=dict(properties),
            dependencies=tuple(
                ProductDependency.from_dict(item)
                for item in _optional_list(data, "dependencies")
            ),
        )

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "categoryId": self.category_id,
        }
        if include_details:
            data["properties"] = dict(self.properties)
            data["dependencies"] = [dep.to_dict() for dep in self.dependencies]
        return data

    def to_record(self) -> dict[str, Any]:
        """Shape consumed by a category schema."""
        return {
            "id": self.id,
            "name": self.name,
            "categoryId": self.category_id,
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class OrderItem:
    product_id: str
    quantity: int

    @classmethod
    def from_dict(cls, payload: Any) -> "OrderItem":
        data = _require_mapping(payload, "order item")
        return cls(product_id=str(data.get("productId", "")), quantity=data.get("quantity", 0))

    def to_dict(self) -> dict[str, Any]:
        return {"productId": self.product_id, "quantity": self.quantity}


def _require_mapping(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise CatalogError(f"Expected {what} to be an object, got {type(payload).__name__}")
    return payload


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise CatalogError(f'Field "{key}" must be a non-empty string')
    return value


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f'Field "{key}" must be a number')
    return value


def _optional_strings(data: dict[str, Any], key: str) -> tuple[str, ...] | None:
    values = data.get(key)
    if values is None:
        return None
    if not isinstance(values, (list, tuple)) or not all(isinstance(v, str) for v in values):
        raise CatalogError(f'Field "{key}" must be a list of strings')
    return tuple(values)


def _optional_list(data: dict[str, Any], key: str) -> list[Any]:
    values = data.get(key)
    if values is None:
        return []
    if not isinstance(values, list):
        raise CatalogError(f'Field "{key}" must be a list')
    return values


def _put_bounds(
    data: dict[str, Any],
    minimum: float | None,
    maximum: float | None,
    enum_values: tuple[str, ...] | None,
) -> None:
    if minimum is not None:
        data["min"] = minimum
    if maximum is not None:
        data["max"] = maximum
    if enum_values is not None:
        data["enumValues"] = list(enum_values)


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
