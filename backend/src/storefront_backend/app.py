"""
Storefront backend entry point.

Builds the assistant from the seed catalog and environment settings and serves
it with uvicorn:

    python -m storefront_backend.app
    uvicorn storefront_backend.app:app --port 3001

Conversations are held in memory and are lost when the process exits.
"""

import random
import sys

import uvicorn
from fastapi import FastAPI
from loguru import logger

from storefront_backend import config
from storefront_backend.catalog_data import PRODUCTS
from storefront_toolkit.agents.recommender import RecommendationSelector
from storefront_toolkit.agents.shopping_agent import ShoppingAgent
from storefront_toolkit.api.auth.header import HeaderAuthProvider
from storefront_toolkit.api.server import create_app
from storefront_toolkit.catalog.in_memory import InMemoryProductCatalog
from storefront_toolkit.conversation_database.controller import ShoppingAssistantController
from storefront_toolkit.conversation_database.in_memory import InMemoryConversationDatabase


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def build_controller(
    limit: int = config.RECOMMENDATION_LIMIT,
    seed: int | None = config.RANDOM_SEED,
) -> ShoppingAssistantController:
    """Assemble catalog, agent and conversation store into a controller."""
    catalog = InMemoryProductCatalog(PRODUCTS)
    agent = ShoppingAgent(
        catalog=catalog,
        selector=RecommendationSelector(limit=limit, rng=random.Random(seed)),
    )
    return ShoppingAssistantController(
        conversation_db=InMemoryConversationDatabase(),
        agent=agent,
        catalog=catalog,
    )


def build_app(controller: ShoppingAssistantController | None = None) -> FastAPI:
    return create_app(
        controller or build_controller(),
        auth_provider=HeaderAuthProvider(),
        cors_origins=config.CORS_ORIGINS,
        title="Storefront Assistant",
    )


app = build_app()


def main() -> None:
    configure_logging()
    logger.info(f"Serving {len(PRODUCTS)} products on http://{config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
