import random

import pytest

from storefront_toolkit.agents.base import IntentTag
from storefront_toolkit.agents.recommender import RecommendationSelector
from storefront_toolkit.catalog.base import Product, ProductCatalog
from storefront_toolkit.catalog.in_memory import InMemoryProductCatalog
from storefront_toolkit.exceptions import InternalError


def ids(products):
    return [product.id for product in products]


@pytest.fixture
def selector() -> RecommendationSelector:
    return RecommendationSelector(rng=random.Random(0))


@pytest.mark.parametrize("intent", [IntentTag.GREETING, IntentTag.HELP])
def test_informational_intents_select_nothing(selector, catalog, intent):
    assert selector.select(intent, catalog) == []


def test_laptop_takes_first_three_name_matches_in_catalog_order(selector, catalog):
    assert ids(selector.select(IntentTag.LAPTOP, catalog)) == ["p1", "p2", "p3"]


def test_phone_matches_names_regardless_of_price(selector, catalog):
    assert ids(selector.select(IntentTag.PHONE, catalog)) == ["p5", "p6"]


def test_book_and_clothing_filter_on_exact_category(selector, catalog):
    assert ids(selector.select(IntentTag.BOOK, catalog)) == ["p7", "p8", "p9"]
    assert ids(selector.select(IntentTag.CLOTHING, catalog)) == ["p11", "p12", "p15"]


def test_budget_is_strictly_ascending_and_under_100(selector, catalog):
    selected = selector.select(IntentTag.BUDGET, catalog)
    prices = [product.price for product in selected]
    assert len(selected) == 3
    assert all(price < 100 for price in prices)
    assert prices == sorted(prices) and len(set(prices)) == len(prices)
    assert ids(selected) == ["p9", "p7", "p8"]


def test_premium_is_strictly_descending_and_over_500(selector, catalog):
    selected = selector.select(IntentTag.PREMIUM, catalog)
    prices = [product.price for product in selected]
    assert all(price > 500 for price in prices)
    assert prices == sorted(prices, reverse=True) and len(set(prices)) == len(prices)
    assert ids(selected) == ["p15", "p1", "p6"]


def test_fallback_picks_highly_rated_products(catalog, products):
    popular = {product.id for product in products if product.rating >= 4.5}
    selector = RecommendationSelector()
    for _ in range(20):
        selected = selector.select(IntentTag.FALLBACK, catalog)
        assert len(selected) == 3
        assert set(ids(selected)) <= popular


def test_fallback_is_reproducible_with_seeded_random(catalog):
    first = RecommendationSelector(rng=random.Random(123)).select(IntentTag.FALLBACK, catalog)
    second = RecommendationSelector(rng=random.Random(123)).select(IntentTag.FALLBACK, catalog)
    assert ids(first) == ids(second)


def test_selection_does_not_mutate_catalog(selector, catalog, products):
    for intent in IntentTag:
        selector.select(intent, catalog)
    assert catalog.all() == products


def test_empty_catalog_yields_empty_selections(selector):
    empty = InMemoryProductCatalog([])
    for intent in IntentTag:
        assert selector.select(intent, empty) == []


def test_limit_is_configurable(catalog):
    assert len(RecommendationSelector(limit=1).select(IntentTag.BOOK, catalog)) == 1
    assert len(RecommendationSelector(limit=10).select(IntentTag.BOOK, catalog)) == 4


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        RecommendationSelector(limit=-1)


class _BrokenCatalog(ProductCatalog):
    def all(self) -> list[Product]:
        raise ConnectionError("catalog offline")


def test_catalog_failure_surfaces_as_internal_error(selector):
    with pytest.raises(InternalError) as exc_info:
        selector.select(IntentTag.LAPTOP, _BrokenCatalog())
    assert isinstance(exc_info.value.__cause__, ConnectionError)
