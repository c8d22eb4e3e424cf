from .loader import CatalogSource, catalog_from_dict, load_catalog
from .models import Catalog
from .sample import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS, sample_catalog
from .verify import CatalogIssue, describe_dependencies, verify_catalog

__all__ = [
    "SAMPLE_CATEGORIES",
    "SAMPLE_PRODUCTS",
    "Catalog",
    "CatalogIssue",
    "CatalogSource",
    "catalog_from_dict",
    "describe_dependencies",
    "load_catalog",
    "sample_catalog",
    "verify_catalog",
]
