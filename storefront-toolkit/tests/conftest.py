"""Shared fixtures for storefront toolkit tests."""

import random

import pytest

from storefront_toolkit.agents.recommender import RecommendationSelector
from storefront_toolkit.agents.shopping_agent import ShoppingAgent
from storefront_toolkit.catalog.base import Product
from storefront_toolkit.catalog.in_memory import InMemoryProductCatalog
from storefront_toolkit.conversation_database.controller import ShoppingAssistantController
from storefront_toolkit.conversation_database.in_memory import InMemoryConversationDatabase


def make_product(product_id: str, name: str, category: str, price: float, rating: float = 4.0) -> Product:
    return Product(id=product_id, name=name, category=category, price=price, rating=rating, description=name)


@pytest.fixture
def products() -> list[Product]:
    return [
        make_product("p1", "Pro Laptop 14", "Electronics", 1499.0, 4.8),
        make_product("p2", "Office Computer", "Electronics", 650.0, 4.1),
        make_product("p3", "Travel Laptop", "Electronics", 899.0, 4.5),
        make_product("p4", "Student Laptop", "Electronics", 349.0, 3.9),
        make_product("p5", "Budget Smartphone", "Electronics", 89.0, 4.0),
        make_product("p6", "Flagship Phone", "Electronics", 1099.0, 4.6),
        make_product("p7", "Sci-Fi Novel", "Books", 14.0, 4.7),
        make_product("p8", "Cookbook", "Books", 25.0, 4.2),
        make_product("p9", "Poetry Collection", "Books", 9.5, 4.9),
        make_product("p10", "History Atlas", "Books", 45.0, 3.5),
        make_product("p11", "Linen Shirt", "Clothing", 39.0, 4.4),
        make_product("p12", "Denim Jeans", "Clothing", 59.0, 4.5),
        make_product("p13", "Garden Hose", "Home & Garden", 29.0, 3.8),
        make_product("p14", "Tennis Racket", "Sports", 120.0, 4.6),
        make_product("p15", "Luxury Watch", "Clothing", 2500.0, 4.9),
    ]


@pytest.fixture
def catalog(products: list[Product]) -> InMemoryProductCatalog:
    return InMemoryProductCatalog(products)


@pytest.fixture
def conversation_db() -> InMemoryConversationDatabase:
    return InMemoryConversationDatabase()


@pytest.fixture
def agent(catalog: InMemoryProductCatalog) -> ShoppingAgent:
    return ShoppingAgent(catalog=catalog, selector=RecommendationSelector(rng=random.Random(42)))


@pytest.fixture
def controller(
    conversation_db: InMemoryConversationDatabase, agent: ShoppingAgent, catalog: InMemoryProductCatalog
) -> ShoppingAssistantController:
    return ShoppingAssistantController(conversation_db=conversation_db, agent=agent, catalog=catalog)
