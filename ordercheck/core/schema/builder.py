"""Build pydantic models that validate products against their category.

Each category's property definitions become one field of a dynamically
created ``properties`` model. Schema construction fails fast with
``ConfigurationError`` on definitions that cannot produce a validator.
"""


from collections.abc import Iterable
from dataclasses import dataclass
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, create_model

from ..canonical.entities import CategoryDefinition, PropertyDefinition
from ..errors import ConfigurationError
from ..validate.report import ValidationIssue, ValidationReport

_REQUIRED = ...
_ENVELOPE_FIELD = Annotated[str, Field(strict=True, min_length=1)]


class _PropertiesBase(BaseModel):
    model_config = ConfigDict(extra="ignore")


class _EnvelopeBase(BaseModel):
    model_config = ConfigDict(extra="ignore")


def _property_type(prop: PropertyDefinition) -> Any:
    if prop.kind == "number":
        return Annotated[
            float,
            Field(strict=True, ge=prop.min, le=prop.max, allow_inf_nan=False),
        ]
    if prop.kind == "boolean":
        return StrictBool
    if prop.kind == "enum":
        if not prop.enum_values:
            raise ConfigurationError(f"Property {prop.key} is of kind 'enum' but has no enumValues")
        return Literal[tuple(prop.enum_values)]
    raise ConfigurationError(f"Unknown property kind: {prop.kind}")


def _field_name(index: int) -> str:
    # Property keys are arbitrary strings, so fields get positional names
    # and carry the key as their alias.
    return f"p{index}"


def _properties_model(category: CategoryDefinition) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for index, prop in enumerate(category.properties):
        annotation = _property_type(prop)
        default = _REQUIRED if prop.required else None
        fields[_field_name(index)] = (annotation, Field(default, alias=prop.key))
    return create_model(
        f"{_model_prefix(category)}Properties",
        __base__=_PropertiesBase,
        **fields,
    )


def _model_prefix(category: CategoryDefinition) -> str:
    cleaned = "".join(part.capitalize() for part in category.id.replace("_", "-").split("-") if part)
    return cleaned if cleaned.isidentifier() else "Category"


@dataclass(frozen=True)
class CategorySchema:
    category: CategoryDefinition
    model: type[BaseModel]

    def validate(self, record: Any) -> ValidationReport:
        try:
            self.model.model_validate(record)
        except ValidationError as exc:
            issues = [_issue_from_error(error) for error in exc.errors()]
            return ValidationReport(valid=False, issues=issues)
        return ValidationReport(valid=True)

    def is_valid(self, record: Any) -> bool:
        return self.validate(record).valid


def _issue_from_error(error: dict[str, Any]) -> ValidationIssue:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return ValidationIssue(
        code=str(error.get("type") or "invalid"),
        message=str(error.get("msg") or "Invalid value"),
        field=location or None,
    )


def build_schema(category: CategoryDefinition) -> CategorySchema:
    properties_model = _properties_model(category)
    model = create_model(
        f"{_model_prefix(category)}Product",
        __base__=_EnvelopeBase,
        id=(_ENVELOPE_FIELD, _REQUIRED),
        name=(_ENVELOPE_FIELD, _REQUIRED),
        category_id=(_ENVELOPE_FIELD, Field(_REQUIRED, alias="categoryId")),
        properties=(properties_model, _REQUIRED),
    )
    return CategorySchema(category=category, model=model)


def build_schemas(categories: Iterable[CategoryDefinition]) -> dict[str, CategorySchema]:
    return {category.id: build_schema(category) for category in categories}


__all__ = ["CategorySchema", "build_schema", "build_schemas"]
