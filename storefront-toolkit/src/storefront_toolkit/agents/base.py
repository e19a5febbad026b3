"""
Core assistant abstractions.

'IntentTag' enumerates the request categories the shopping assistant can
recognise. 'AssistantReply' is what an agent hands back to the controller: the
reply text plus the products to show next to it. 'Agent' is the interface the
controller depends on, so a different assistant (for example an LLM-backed
one) can be swapped in without touching conversation handling.
"""

from abc import ABC, abstractmethod
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from storefront_toolkit.catalog.base import Product


class IntentTag(StrEnum):
    GREETING = "greeting"
    LAPTOP = "laptop"
    PHONE = "phone"
    BOOK = "book"
    CLOTHING = "clothing"
    BUDGET = "budget"
    PREMIUM = "premium"
    HELP = "help"
    FALLBACK = "fallback"


class AssistantReply(BaseModel):
    """Reply text and the products attached to it, tagged with the intent that produced them."""

    model_config = ConfigDict(frozen=True)

    intent: IntentTag
    text: str
    products: tuple[Product, ...] = ()


class Agent(ABC):
    """
    Abstract base class for shopping assistants.

    'answer' must be free of side effects on conversation state: the controller
    owns persistence and only commits a turn once 'answer' has returned.
    """

    def __init__(self, description: str = "") -> None:
        self.description = description

    @abstractmethod
    def answer(self, query: str) -> AssistantReply:
        """Return the reply for a single user message."""
        pass
