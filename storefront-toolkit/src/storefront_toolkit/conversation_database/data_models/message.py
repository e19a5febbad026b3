"""
Message data model.

A message is one side of a turn: the user's text or the assistant's reply.
Assistant messages carry the products the assistant recommended; user
messages never do. Messages are frozen once created and only ever appended to
their conversation, so insertion order is conversation order.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from storefront_toolkit.catalog.base import Product


class Roles(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """
    A single message within a conversation.

    'create_timestamp' is milliseconds since the epoch and serialises as
    'timestamp' to match the storefront client.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    role: Roles
    content: str
    products: tuple[Product, ...] = ()
    create_timestamp: int = Field(alias="timestamp")

    @model_validator(mode="after")
    def _only_assistant_has_products(self) -> "Message":
        if self.role == Roles.USER and self.products:
            raise ValueError("User messages cannot carry products")
        return self
