from .constraints import product_matches, properties_match, satisfies_constraint
from .dependencies import DependencyCheck, OrderedProduct, check_dependency
from .orders import check_order, resolve_order
from .report import ValidationError, ValidationIssue, ValidationReport, ValidationResult

__all__ = [
    "DependencyCheck",
    "OrderedProduct",
    "ValidationError",
    "ValidationIssue",
    "ValidationReport",
    "ValidationResult",
    "check_dependency",
    "check_order",
    "product_matches",
    "properties_match",
    "resolve_order",
    "satisfies_constraint",
]
