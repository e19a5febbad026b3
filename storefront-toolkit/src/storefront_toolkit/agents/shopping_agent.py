"""
Rule-based shopping assistant.

'ShoppingAgent' chains the three stages of a reply: the 'IntentClassifier'
picks an intent, the 'RecommendationSelector' pulls matching products from the
catalog and the 'ResponseComposer' pairs them with the intent's reply text.
Each stage is injected so tests can substitute a seeded random source or a
custom rule table.
"""

from loguru import logger

from storefront_toolkit.agents.base import Agent, AssistantReply
from storefront_toolkit.agents.composer import ResponseComposer
from storefront_toolkit.agents.intent_classifier import IntentClassifier
from storefront_toolkit.agents.recommender import RecommendationSelector
from storefront_toolkit.catalog.base import ProductCatalog


class ShoppingAgent(Agent):
    def __init__(
        self,
        catalog: ProductCatalog,
        classifier: IntentClassifier | None = None,
        selector: RecommendationSelector | None = None,
        composer: ResponseComposer | None = None,
        description: str = "Rule-based product recommendations",
    ) -> None:
        super().__init__(description)
        self.catalog = catalog
        self.classifier = classifier or IntentClassifier()
        self.selector = selector or RecommendationSelector()
        self.composer = composer or ResponseComposer()

    def answer(self, query: str) -> AssistantReply:
        intent = self.classifier.classify(query)
        products = self.selector.select(intent, self.catalog)
        reply = self.composer.compose(intent, products)
        logger.info(f"Intent '{intent}' answered with {len(reply.products)} products")
        return reply
