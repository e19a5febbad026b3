"""
Product data model and catalog query interface.

The catalog is read-only from the point of view of the assistant: the
recommendation selector narrows it down with predicates, orders it with a sort
key and truncates it with 'slice'. Each of these returns a new list and never
reorders or mutates the underlying collection, so repeated queries see the
catalog in its original order.

'ProductCatalog' is the pluggable backend. The only implementation shipped with
the toolkit is 'InMemoryProductCatalog'.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    A single catalog item.

    Field aliases match the JSON shape the storefront client expects
    ('reviews', 'inStock', 'image'); both names are accepted on input.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    description: str = ""
    category: str
    price: float = Field(ge=0)
    rating: float = Field(default=0.0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0, alias="reviews")
    in_stock: bool = Field(default=True, alias="inStock")
    features: tuple[str, ...] = ()
    image_url: str | None = Field(default=None, alias="image")


ProductPredicate = Callable[[Product], bool]


class ProductQuery(BaseModel):
    """Listing parameters accepted by the '/api/products' endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    category: str | None = None
    search: str | None = None
    min_price: float | None = Field(default=None, alias="minPrice")
    max_price: float | None = Field(default=None, alias="maxPrice")
    limit: int = Field(default=20, ge=0)
    offset: int = Field(default=0, ge=0)


class ProductPage(BaseModel):
    """One page of a product listing together with the unpaginated total."""

    model_config = ConfigDict(populate_by_name=True)

    products: list[Product]
    total: int
    has_more: bool = Field(alias="hasMore")


class ProductCatalog(ABC):
    """Abstract read-only query surface over 'Product' records."""

    @abstractmethod
    def all(self) -> list[Product]:
        """Return every product in catalog order."""
        pass

    def filter(self, predicate: ProductPredicate, products: Sequence[Product] | None = None) -> list[Product]:
        """Return the products matching 'predicate', preserving order."""
        source = self.all() if products is None else products
        return [product for product in source if predicate(product)]

    def find(self, predicate: ProductPredicate) -> Product | None:
        """Return the first product matching 'predicate', or None."""
        return next((product for product in self.all() if predicate(product)), None)

    @staticmethod
    def sort(products: Sequence[Product], key: Callable[[Product], Any], reverse: bool = False) -> list[Product]:
        return sorted(products, key=key, reverse=reverse)

    @staticmethod
    def slice(products: Sequence[Product], offset: int, limit: int) -> list[Product]:
        return list(products[offset : offset + limit])

    def get_product_by_id(self, product_id: str) -> Product | None:
        return self.find(lambda product: product.id == product_id)

    def query(self, product_query: ProductQuery) -> ProductPage:
        """
        Filter by category, free-text search and price range, then paginate.

        Category matching is case-insensitive and the value 'all' disables it.
        The search term is matched against name, description and category.
        """
        products = self.all()

        category = product_query.category
        if category and category.lower() != "all":
            products = self.filter(lambda p: p.category.lower() == category.lower(), products)

        if product_query.search:
            term = product_query.search.lower()
            products = self.filter(
                lambda p: term in p.name.lower() or term in p.description.lower() or term in p.category.lower(),
                products,
            )

        if product_query.min_price is not None:
            min_price = product_query.min_price
            products = self.filter(lambda p: p.price >= min_price, products)
        if product_query.max_price is not None:
            max_price = product_query.max_price
            products = self.filter(lambda p: p.price <= max_price, products)

        total = len(products)
        page = self.slice(products, product_query.offset, product_query.limit)
        return ProductPage(
            products=page,
            total=total,
            has_more=product_query.offset + product_query.limit < total,
        )
