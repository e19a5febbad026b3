"""
Keyword-based intent classification.

The rule table is an ordered tuple of 'KeywordRule' objects. 'IntentClassifier'
walks it top to bottom and returns the tag of the first rule with a keyword
that occurs anywhere in the lower-cased message, so the position of a rule in
the table is its priority: "I need a cheap laptop" is a laptop request, not a
budget request, because the laptop rule comes first.

Keywords are plain substrings, not words. "this" therefore matches the
greeting keyword "hi"; callers relying on exact-word semantics should supply
their own rule table.
"""

from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict

from storefront_toolkit.agents.base import IntentTag


class KeywordRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: IntentTag
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


DEFAULT_RULES: tuple[KeywordRule, ...] = (
    KeywordRule(tag=IntentTag.GREETING, keywords=("hello", "hi", "hey")),
    KeywordRule(tag=IntentTag.LAPTOP, keywords=("laptop", "computer")),
    KeywordRule(tag=IntentTag.PHONE, keywords=("phone", "smartphone")),
    KeywordRule(tag=IntentTag.BOOK, keywords=("book",)),
    KeywordRule(tag=IntentTag.CLOTHING, keywords=("clothing", "shirt", "jeans")),
    KeywordRule(tag=IntentTag.BUDGET, keywords=("cheap", "affordable", "budget")),
    KeywordRule(tag=IntentTag.PREMIUM, keywords=("expensive", "premium", "luxury")),
    KeywordRule(tag=IntentTag.HELP, keywords=("help", "what can you do")),
)


class IntentClassifier:
    """First-match-wins classifier over an ordered rule table."""

    def __init__(self, rules: Sequence[KeywordRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def classify(self, message: str) -> IntentTag:
        text = message.lower()
        for rule in self.rules:
            if rule.matches(text):
                logger.debug(f"Classified {message[:60]!r} as {rule.tag}")
                return rule.tag
        logger.debug(f"No rule matched {message[:60]!r}, falling back")
        return IntentTag.FALLBACK
