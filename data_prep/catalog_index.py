"""
(year, month) -> product list lookup, plus product resolution by name.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from core.schema import CatalogKey, MonthlyCatalog, Product

logger = logging.getLogger(__name__)

CatalogIndex = Dict[CatalogKey, List[Product]]


def build_catalog_index(catalogs: Iterable[MonthlyCatalog]) -> CatalogIndex:
    """
    Map each catalog's (year, month) to its ordered product list.
    Duplicate keys overwrite: the last catalog loaded wins.
    """
    index: CatalogIndex = {}
    for catalog in catalogs:
        if catalog.key in index:
            logger.warning(
                "Duplicate catalog for %s %d; keeping the later one",
                catalog.month,
                catalog.year,
            )
        index[catalog.key] = list(catalog.products)
    return index


def find_product(products: Iterable[Product], name: str) -> Optional[Product]:
    """First product whose name matches exactly, or None."""
    for product in products:
        if product.name == name:
            return product
    return None
