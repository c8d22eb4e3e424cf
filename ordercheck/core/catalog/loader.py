"""Read catalog documents into catalog entities."""


import json
from pathlib import Path
from typing import Any

from ..canonical.entities import CategoryDefinition, Product
from ..errors import CatalogError
from .models import Catalog

CatalogSource = Catalog | dict[str, Any] | bytes | str | Path


def _read_payload(source: bytes | str | Path) -> Any:
    if isinstance(source, Path):
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Cannot read catalog file {source}: {exc}") from exc
    elif isinstance(source, bytes):
        try:
            text = source.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise CatalogError("Catalog must be UTF-8 encoded JSON") from exc
    elif source.lstrip().startswith("{"):
        text = source
    else:
        return _read_payload(Path(source))

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog is not valid JSON: {exc.msg} (line {exc.lineno})") from exc


def _unique(items: list[Any], kind: str) -> None:
    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise CatalogError(f'Duplicate {kind} id "{item.id}"')
        seen.add(item.id)


def catalog_from_dict(payload: Any) -> Catalog:
    if not isinstance(payload, dict):
        raise CatalogError("Catalog document must be an object with 'categories' and 'products'")

    raw_categories = payload.get("categories") or []
    raw_products = payload.get("products") or []
    if not isinstance(raw_categories, list) or not isinstance(raw_products, list):
        raise CatalogError("Catalog 'categories' and 'products' must be lists")

    categories = [CategoryDefinition.from_dict(item) for item in raw_categories]
    products = [Product.from_dict(item) for item in raw_products]
    _unique(categories, "category")
    _unique(products, "product")
    return Catalog(categories=tuple(categories), products=tuple(products))


def load_catalog(source: CatalogSource) -> Catalog:
    """Load a catalog from a JSON file path, JSON text/bytes, or a decoded dict."""
    if isinstance(source, Catalog):
        return source
    if isinstance(source, dict):
        return catalog_from_dict(source)
    return catalog_from_dict(_read_payload(source))


__all__ = ["CatalogSource", "catalog_from_dict", "load_catalog"]
