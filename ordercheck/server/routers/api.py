"""JSON API routes: /health, /api/v1/*."""


import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...config import get_settings
from ...core.catalog import Catalog
from ..helpers.catalog import get_catalog
from ..helpers.ordering import run_validate_order
from ..schemas import (
	ErrorResponse,
	OrderValidationRequest,
	ProductDetailResponse,
	ProductListItemResponse,
	ValidationResultResponse,
)

settings = get_settings()
router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _error(status_code: int, message: str) -> JSONResponse:
	return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/health")
def health() -> dict:
	return {"status": "ok", "app": settings.app_name}


@router.get("/api/v1/products", response_model=list[ProductListItemResponse])
def list_products(catalog: Catalog = Depends(get_catalog)) -> list[dict]:
	return [product.to_dict(include_details=False) for product in catalog.products]


@router.get(
	"/api/v1/products/{product_id}",
	response_model=ProductDetailResponse,
	responses={404: {"model": ErrorResponse}},
)
def get_product(product_id: str, catalog: Catalog = Depends(get_catalog)) -> dict | JSONResponse:
	product = catalog.product(product_id)
	if product is None:
		return _error(404, f'Product with id "{product_id}" not found')
	return product.to_dict()


@router.get("/api/v1/categories")
def list_categories(catalog: Catalog = Depends(get_catalog)) -> list[dict]:
	return [category.to_dict() for category in catalog.categories]


@router.post(
	"/api/v1/orders/validate",
	response_model=ValidationResultResponse,
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def validate_order(
	payload: OrderValidationRequest,
	catalog: Catalog = Depends(get_catalog),
) -> dict | JSONResponse:
	try:
		result = run_validate_order(payload.to_order(), catalog)
	except Exception:
		logger.exception("Error validating order")
		return _error(500, "Failed to validate order")
	return result.to_dict()
