from storefront_toolkit.agents.base import Agent, AssistantReply, IntentTag
from storefront_toolkit.agents.composer import RESPONSE_TEMPLATES, ResponseComposer
from storefront_toolkit.agents.intent_classifier import DEFAULT_RULES, IntentClassifier, KeywordRule
from storefront_toolkit.agents.recommender import RecommendationSelector, SelectionPolicy
from storefront_toolkit.agents.shopping_agent import ShoppingAgent

__all__ = [
    "DEFAULT_RULES",
    "RESPONSE_TEMPLATES",
    "Agent",
    "AssistantReply",
    "IntentClassifier",
    "IntentTag",
    "KeywordRule",
    "RecommendationSelector",
    "ResponseComposer",
    "SelectionPolicy",
    "ShoppingAgent",
]
