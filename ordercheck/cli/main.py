"""Command-line frontend for the ordercheck core engine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from ordercheck.config import get_settings
from ordercheck.core import (
    Catalog,
    CatalogError,
    check_order,
    describe_dependencies,
    load_catalog,
    sample_catalog,
    verify_catalog,
)

logger = logging.getLogger("ordercheck.cli")


def _json_dump(data: Any) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _resolve_catalog(args: argparse.Namespace) -> Catalog:
    catalog_path = args.catalog or get_settings().catalog_path
    if not catalog_path:
        logger.debug("No catalog given; using the built-in sample catalog.")
        return sample_catalog()
    logger.debug("Loading catalog from %s", catalog_path)
    return load_catalog(Path(catalog_path))


def _parse_item(text: str) -> dict[str, Any]:
    product_id, sep, quantity = text.rpartition("=")
    if not sep or not product_id:
        raise argparse.ArgumentTypeError(f"Expected PRODUCT_ID=QUANTITY, got {text!r}")
    try:
        parsed_quantity = int(quantity)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Quantity must be an integer in {text!r}") from exc
    return {"productId": product_id, "quantity": parsed_quantity}


def _read_order_file(path: str) -> list[dict[str, Any]]:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogError(f"Cannot read order file {path}: {exc}") from exc
    if isinstance(payload, dict):
        payload = payload.get("items")
    if not isinstance(payload, list):
        raise CatalogError(f"Order file {path} must contain a list of items")
    return payload


def _cmd_check_order(args: argparse.Namespace) -> int:
    catalog = _resolve_catalog(args)
    order = list(args.items or [])
    if args.order:
        order.extend(_read_order_file(args.order))
    result = check_order(order, catalog.products, catalog.categories)
    _json_dump(result.to_dict())
    return 0 if result.valid else 1


def _cmd_verify_catalog(args: argparse.Namespace) -> int:
    catalog = _resolve_catalog(args)
    issues = verify_catalog(catalog)
    _json_dump(
        {
            "categories": len(catalog.categories),
            "products": len(catalog.products),
            "issues": [issue.to_dict() for issue in issues],
        }
    )
    return 1 if issues else 0


def _cmd_dependencies(args: argparse.Namespace) -> int:
    catalog = _resolve_catalog(args)
    for line in describe_dependencies(catalog):
        print(line)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordercheck", description="Order dependency checker CLI")
    parser.add_argument("--catalog", default=None, help="Catalog JSON file (defaults to CATALOG_PATH, then the sample catalog)")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check-order", help="Validate an order against catalog dependency rules")
    check.add_argument("items", nargs="*", type=_parse_item, help="PRODUCT_ID=QUANTITY pairs")
    check.add_argument("--order", default=None, help="JSON file with a list of {productId, quantity} items")
    check.set_defaults(func=_cmd_check_order)

    verify = subparsers.add_parser("verify-catalog", help="Check catalog products against their category schemas")
    verify.set_defaults(func=_cmd_verify_catalog)

    deps = subparsers.add_parser("dependencies", help="List the dependency rules of every product")
    deps.set_defaults(func=_cmd_dependencies)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(Path.cwd() / ".env")
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except CatalogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
