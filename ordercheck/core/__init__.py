"""Core engine API.

The core layer is framework-agnostic and safe to import from scripts, tests,
CLI commands, and web frontends. Every operation takes its catalog as an
explicit argument; nothing here reads the environment or holds state.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Catalog": ("ordercheck.core.catalog", "Catalog"),
    "CatalogError": ("ordercheck.core.errors", "CatalogError"),
    "CatalogIssue": ("ordercheck.core.catalog", "CatalogIssue"),
    "CategoryDefinition": ("ordercheck.core.canonical", "CategoryDefinition"),
    "CategorySchema": ("ordercheck.core.schema", "CategorySchema"),
    "ConfigurationError": ("ordercheck.core.errors", "ConfigurationError"),
    "OrderItem": ("ordercheck.core.canonical", "OrderItem"),
    "Product": ("ordercheck.core.canonical", "Product"),
    "ProductDependency": ("ordercheck.core.canonical", "ProductDependency"),
    "PropertyConstraint": ("ordercheck.core.canonical", "PropertyConstraint"),
    "PropertyDefinition": ("ordercheck.core.canonical", "PropertyDefinition"),
    "ValidationError": ("ordercheck.core.validate", "ValidationError"),
    "ValidationResult": ("ordercheck.core.validate", "ValidationResult"),
    "build_schema": ("ordercheck.core.schema", "build_schema"),
    "build_schemas": ("ordercheck.core.schema", "build_schemas"),
    "check_dependency": ("ordercheck.core.validate", "check_dependency"),
    "check_order": ("ordercheck.core.validate", "check_order"),
    "describe_dependencies": ("ordercheck.core.catalog", "describe_dependencies"),
    "load_catalog": ("ordercheck.core.catalog", "load_catalog"),
    "sample_catalog": ("ordercheck.core.catalog", "sample_catalog"),
    "satisfies_constraint": ("ordercheck.core.validate", "satisfies_constraint"),
    "validate_order": ("ordercheck.core.api", "validate_order"),
    "verify_catalog": ("ordercheck.core.catalog", "verify_catalog"),
}

__all__ = sorted(_LAZY_EXPORTS)


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
