from storefront_toolkit.catalog.base import Product, ProductCatalog, ProductPage, ProductQuery
from storefront_toolkit.catalog.in_memory import InMemoryProductCatalog

__all__ = [
    "InMemoryProductCatalog",
    "Product",
    "ProductCatalog",
    "ProductPage",
    "ProductQuery",
]
