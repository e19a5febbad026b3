"""
In-memory product catalog.

Holds an immutable tuple of products loaded at construction time. Intended for
demos and tests; a database-backed catalog only needs to implement 'all'.
"""

from collections.abc import Iterable

from loguru import logger

from storefront_toolkit.catalog.base import Product, ProductCatalog


class InMemoryProductCatalog(ProductCatalog):
    def __init__(self, products: Iterable[Product]) -> None:
        self._products = tuple(products)
        ids = [product.id for product in self._products]
        if len(ids) != len(set(ids)):
            raise ValueError("Product ids must be unique")
        logger.debug(f"Catalog loaded with {len(self._products)} products")

    def all(self) -> list[Product]:
        return list(self._products)

    def __len__(self) -> int:
        return len(self._products)
