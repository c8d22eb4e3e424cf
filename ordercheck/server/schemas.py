from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrderItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", examples=["platform-modern-200"])
    quantity: int = Field(..., strict=True, gt=0, examples=[1])


class OrderValidationRequest(BaseModel):
    items: list[OrderItemRequest] = Field(
        ...,
        description="Products to validate together, each with a positive quantity.",
    )

    def to_order(self) -> list[dict[str, Any]]:
        return [{"productId": item.product_id, "quantity": item.quantity} for item in self.items]


class ValidationErrorResponse(BaseModel):
    productId: str
    message: str


class ValidationResultResponse(BaseModel):
    valid: bool
    errors: list[ValidationErrorResponse] = Field(default_factory=list)


class ProductListItemResponse(BaseModel):
    id: str
    name: str
    categoryId: str


class ProductDetailResponse(ProductListItemResponse):
    properties: dict[str, Any] = Field(default_factory=dict)
    dependencies: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    details: list[dict[str, Any]] | None = None
