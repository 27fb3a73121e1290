"""
Data preparation — loading the JSON inputs, indexing catalogs, validation.
"""

from .loader import load_snapshots, load_catalogs
from .catalog_index import CatalogIndex, build_catalog_index, find_product
from .validators import ValidationResult, validate_inputs

__all__ = [
    "load_snapshots",
    "load_catalogs",
    "CatalogIndex",
    "build_catalog_index",
    "find_product",
    "ValidationResult",
    "validate_inputs",
]
