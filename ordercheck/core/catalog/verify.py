"""Catalog authoring checks run when a catalog is imported."""


from dataclasses import dataclass
from typing import Any

from ..canonical.entities import PropertyConstraint
from ..errors import ConfigurationError
from ..schema import CategorySchema, build_schema
from .models import Catalog


@dataclass(frozen=True)
class CatalogIssue:
    code: str
    message: str
    category_id: str | None = None
    product_id: str | None = None
    field: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "categoryId": self.category_id,
            "productId": self.product_id,
            "field": self.field,
        }


def _build_category_schemas(catalog: Catalog) -> tuple[dict[str, CategorySchema], list[CatalogIssue]]:
    schemas: dict[str, CategorySchema] = {}
    issues: list[CatalogIssue] = []
    for category in catalog.categories:
        try:
            schemas[category.id] = build_schema(category)
        except ConfigurationError as exc:
            issues.append(
                CatalogIssue(
                    code="invalid_category_schema",
                    message=str(exc),
                    category_id=category.id,
                )
            )
    return schemas, issues


def _constraint_issue(
    product_id: str,
    target_category_id: str,
    constraint: PropertyConstraint,
    declared_kind: str | None,
) -> CatalogIssue | None:
    if declared_kind is None:
        return CatalogIssue(
            code="unknown_constraint_property",
            message=(
                f'Dependency on "{target_category_id}" constrains property "{constraint.key}", '
                "which that category does not define"
            ),
            product_id=product_id,
            category_id=target_category_id,
            field=constraint.key,
        )
    if declared_kind != constraint.kind:
        return CatalogIssue(
            code="constraint_kind_mismatch",
            message=(
                f'Constraint on "{constraint.key}" is of kind \'{constraint.kind}\' '
                f"but the property is of kind '{declared_kind}'"
            ),
            product_id=product_id,
            category_id=target_category_id,
            field=constraint.key,
        )
    return None


def verify_catalog(catalog: Catalog) -> list[CatalogIssue]:
    """Return every authoring problem found in ``catalog``.

    Nothing is raised: schema configuration errors are reported as issues so
    a whole catalog can be reviewed at once.
    """
    schemas, issues = _build_category_schemas(catalog)
    known_categories = {category.id: category for category in catalog.categories}

    for product in catalog.products:
        if product.category_id not in known_categories:
            issues.append(
                CatalogIssue(
                    code="unknown_category",
                    message=f'Product "{product.id}" belongs to unknown category "{product.category_id}"',
                    product_id=product.id,
                    category_id=product.category_id,
                )
            )
        else:
            schema = schemas.get(product.category_id)
            if schema is not None:
                report = schema.validate(product.to_record())
                for issue in report.issues:
                    issues.append(
                        CatalogIssue(
                            code=issue.code,
                            message=issue.message,
                            product_id=product.id,
                            category_id=product.category_id,
                            field=issue.field,
                        )
                    )

        for dependency in product.dependencies:
            target = known_categories.get(dependency.category_id)
            if target is None:
                issues.append(
                    CatalogIssue(
                        code="unknown_dependency_category",
                        message=f'Dependency targets unknown category "{dependency.category_id}"',
                        product_id=product.id,
                        category_id=dependency.category_id,
                    )
                )
                continue
            for constraint in dependency.property_constraints:
                declared = target.find_property(constraint.key)
                issue = _constraint_issue(
                    product.id,
                    target.id,
                    constraint,
                    declared.kind if declared is not None else None,
                )
                if issue is not None:
                    issues.append(issue)

    return issues


def _describe_constraint(constraint: PropertyConstraint) -> str:
    text = f"{constraint.key} ({constraint.kind})"
    if constraint.min is not None:
        text += f" min: {constraint.min}"
    if constraint.max is not None:
        text += f" max: {constraint.max}"
    if constraint.value is not None:
        text += f" value: {str(constraint.value).lower()}"
    if constraint.enum_values:
        text += f" values: {', '.join(constraint.enum_values)}"
    return text


def describe_dependencies(catalog: Catalog) -> list[str]:
    """Render the dependency rules of every product as indented text lines."""
    lines: list[str] = []
    for product in catalog.products:
        lines.append(f"{product.name} ({product.id}):")
        lines.append(f"  Category: {product.category_id}")
        if not product.dependencies:
            lines.append("  Dependencies: None")
            continue
        lines.append("  Dependencies:")
        for index, dependency in enumerate(product.dependencies, start=1):
            lines.append(f"    {index}. Requires {dependency.min_count}+ from category: {dependency.category_id}")
            for constraint in dependency.property_constraints:
                lines.append(f"       - {_describe_constraint(constraint)}")
    return lines


__all__ = ["CatalogIssue", "describe_dependencies", "verify_catalog"]
