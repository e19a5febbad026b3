"""
Per-intent product selection.

Each intent maps to a 'SelectionPolicy': a predicate that narrows the catalog,
an optional ordering, and a flag for the randomised fallback. The selector
applies the policy and keeps the first 'limit' products. Informational intents
(greeting, help) have no policy and select nothing.

The fallback policy shuffles highly rated products so repeated unmatched
messages show a varied selection. The shuffle uses the 'random.Random'
instance passed to the selector; pass a seeded one for reproducible output.
"""

import random
from collections.abc import Callable
from typing import Any, NamedTuple

from loguru import logger

from storefront_toolkit.agents.base import IntentTag
from storefront_toolkit.catalog.base import Product, ProductCatalog, ProductPredicate
from storefront_toolkit.exceptions import InternalError

DEFAULT_LIMIT = 3
BUDGET_PRICE_CEILING = 100
PREMIUM_PRICE_FLOOR = 500
POPULAR_RATING_FLOOR = 4.5


def _name_contains(*terms: str) -> ProductPredicate:
    return lambda product: any(term in product.name.lower() for term in terms)


def _category_is(category: str) -> ProductPredicate:
    return lambda product: product.category == category


class SelectionPolicy(NamedTuple):
    predicate: ProductPredicate
    sort_key: Callable[[Product], Any] | None = None
    descending: bool = False
    shuffle: bool = False


SELECTION_POLICIES: dict[IntentTag, SelectionPolicy] = {
    IntentTag.LAPTOP: SelectionPolicy(_name_contains("laptop", "computer")),
    IntentTag.PHONE: SelectionPolicy(_name_contains("phone", "smartphone")),
    IntentTag.BOOK: SelectionPolicy(_category_is("Books")),
    IntentTag.CLOTHING: SelectionPolicy(_category_is("Clothing")),
    IntentTag.BUDGET: SelectionPolicy(
        lambda product: product.price < BUDGET_PRICE_CEILING,
        sort_key=lambda product: product.price,
    ),
    IntentTag.PREMIUM: SelectionPolicy(
        lambda product: product.price > PREMIUM_PRICE_FLOOR,
        sort_key=lambda product: product.price,
        descending=True,
    ),
    IntentTag.FALLBACK: SelectionPolicy(lambda product: product.rating >= POPULAR_RATING_FLOOR, shuffle=True),
}


class RecommendationSelector:
    """
    Select up to 'limit' catalog products for an intent.

    Attributes:
        limit: Maximum number of products returned per selection.
        rng: Random source used by shuffling policies.
        policies: Intent to policy table. Intents without an entry select nothing.
    """

    def __init__(
        self,
        limit: int = DEFAULT_LIMIT,
        rng: random.Random | None = None,
        policies: dict[IntentTag, SelectionPolicy] | None = None,
    ) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        self.limit = limit
        self.rng = rng or random.Random()
        self.policies = SELECTION_POLICIES if policies is None else policies

    def select(self, intent: IntentTag, catalog: ProductCatalog) -> list[Product]:
        policy = self.policies.get(intent)
        if policy is None:
            return []

        try:
            products = catalog.filter(policy.predicate)
        except Exception as exc:
            raise InternalError(f"Catalog query failed for intent '{intent}'") from exc

        if policy.sort_key is not None:
            products = catalog.sort(products, key=policy.sort_key, reverse=policy.descending)
        if policy.shuffle:
            self.rng.shuffle(products)

        selected = catalog.slice(products, 0, self.limit)
        logger.debug(f"Selected {len(selected)} of {len(products)} candidates for intent '{intent}'")
        return selected
