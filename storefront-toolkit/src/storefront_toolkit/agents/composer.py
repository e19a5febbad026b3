"""
Fixed reply templates, one per intent.
"""

from collections.abc import Mapping, Sequence

from storefront_toolkit.agents.base import AssistantReply, IntentTag
from storefront_toolkit.catalog.base import Product

RESPONSE_TEMPLATES: dict[IntentTag, str] = {
    IntentTag.GREETING: (
        "Hello! Welcome to our store! I'm here to help you find the perfect products. "
        "You can ask me about electronics, books, clothing, home & garden items, or sports equipment. "
        "What are you looking for today?"
    ),
    IntentTag.LAPTOP: "I found some great laptops for you! Here are our top recommendations:",
    IntentTag.PHONE: "Here are some excellent smartphones I'd recommend:",
    IntentTag.BOOK: "Great choice! Here are some popular books:",
    IntentTag.CLOTHING: "Here are some fashionable clothing items:",
    IntentTag.BUDGET: "Here are some great budget-friendly options:",
    IntentTag.PREMIUM: "Here are our premium products:",
    IntentTag.HELP: (
        "I can help you with:\n"
        "• Finding products by category (electronics, books, clothing, etc.)\n"
        "• Searching for specific items\n"
        "• Getting price comparisons\n"
        "• Product recommendations\n"
        "• Answering questions about features\n"
        "\n"
        "Just tell me what you're looking for!"
    ),
    IntentTag.FALLBACK: (
        "I'd be happy to help you find what you're looking for! Here are some of our most popular products. "
        "You can also try asking about specific categories like electronics, books, clothing, "
        "or tell me your budget range."
    ),
}


class ResponseComposer:
    def __init__(self, templates: Mapping[IntentTag, str] = RESPONSE_TEMPLATES) -> None:
        missing = set(IntentTag) - set(templates)
        if missing:
            raise ValueError(f"Missing reply templates for: {', '.join(sorted(missing))}")
        self.templates = dict(templates)

    def compose(self, intent: IntentTag, products: Sequence[Product]) -> AssistantReply:
        return AssistantReply(intent=intent, text=self.templates[intent], products=tuple(products))
