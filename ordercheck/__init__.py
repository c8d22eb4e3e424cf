"""Public package entrypoint for the ordercheck engine.

This package checks whether an order composed from catalog products satisfies
every product's declared dependency rules, plus optional frontend adapters
(CLI and FastAPI server).
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Catalog": ("ordercheck.core", "Catalog"),
    "ValidationResult": ("ordercheck.core", "ValidationResult"),
    "app": ("ordercheck.server.main", "app"),
    "build_schema": ("ordercheck.core", "build_schema"),
    "check_order": ("ordercheck.core", "check_order"),
    "create_app": ("ordercheck.server.main", "create_app"),
    "load_catalog": ("ordercheck.core", "load_catalog"),
    "sample_catalog": ("ordercheck.core", "sample_catalog"),
}

try:
    __version__ = version("ordercheck")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Catalog",
    "ValidationResult",
    "__version__",
    "app",
    "build_schema",
    "check_order",
    "create_app",
    "load_catalog",
    "sample_catalog",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
