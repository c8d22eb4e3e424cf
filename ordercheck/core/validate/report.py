"""Validation report types for order and catalog checks."""


from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    severity: str = "error"
    field: str | None = None


@dataclass
class ValidationReport:
    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class ValidationError:
    product_id: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"productId": self.product_id, "message": self.message}


@dataclass
class ValidationResult:
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> "ValidationResult":
        return cls(valid=not errors, errors=list(errors))

    def errors_for(self, product_id: str) -> list[ValidationError]:
        return [error for error in self.errors if error.product_id == product_id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
        }


__all__ = ["ValidationError", "ValidationIssue", "ValidationReport", "ValidationResult"]
