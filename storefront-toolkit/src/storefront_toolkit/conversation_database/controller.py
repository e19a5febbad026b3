"""
Storefront assistant controller (Facade).

'ShoppingAssistantController' is the single entry point for application logic
behind the HTTP layer. It coordinates the conversation database, the shopping
agent and the product catalog:

    'process_new_message'          - run one chat turn and return the assistant reply.
    'get_conversations_by_user_id' - the user's conversations, most recent first.
    'get_conversation'             - one owned conversation.
    'delete_conversation'          - remove an owned conversation and its messages.
    'list_products' / 'get_product' - read-only catalog access for the storefront.

A chat turn is committed as a unit. The reply is generated before anything is
written, and the user message and assistant reply are then appended together
with a single 'append_messages' call. If the agent fails, nothing is appended
and a conversation opened for that turn is removed again, so a retry never
sees a dangling user message.
"""

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from storefront_toolkit.agents.base import Agent
from storefront_toolkit.catalog.base import Product, ProductCatalog, ProductPage, ProductQuery
from storefront_toolkit.conversation_database.data_models.conversation import Conversation, ConversationDatabase
from storefront_toolkit.conversation_database.data_models.message import Message, Roles
from storefront_toolkit.exceptions import InternalError, NotFoundError, ValidationError
from storefront_toolkit.utils.database import generate_uid
from storefront_toolkit.utils.time import get_current_timestamp


class MessageInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    conversation_id: str | None = Field(default=None, alias="conversationId")


class ChatResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str = Field(alias="conversationId")
    message: Message


class ShoppingAssistantController:
    def __init__(
        self,
        conversation_db: ConversationDatabase,
        agent: Agent,
        catalog: ProductCatalog,
    ):
        self.conversation_db = conversation_db
        self.agent = agent
        self.catalog = catalog

    async def process_new_message(self, user_input: MessageInput, user_id: str) -> ChatResponse:
        content = user_input.message
        if content is None or not content.strip():
            raise ValidationError("Message is required")

        conversation = await self.conversation_db.find_or_create(user_id, user_input.conversation_id)
        opened_for_turn = conversation.id != user_input.conversation_id

        user_message = Message(
            id=generate_uid(),
            role=Roles.USER,
            content=content,
            create_timestamp=get_current_timestamp(),
        )

        try:
            reply = self.agent.answer(content)
        except Exception as exc:
            if opened_for_turn:
                await self.conversation_db.delete_conversation(user_id, conversation.id)
            if isinstance(exc, InternalError):
                raise
            logger.exception(f"Reply generation failed in conversation {conversation.id}")
            raise InternalError("Failed to generate a reply") from exc

        assistant_message = Message(
            id=generate_uid(),
            role=Roles.ASSISTANT,
            content=reply.text,
            products=reply.products,
            create_timestamp=max(get_current_timestamp(), user_message.create_timestamp),
        )

        await self.conversation_db.append_messages(conversation.id, [user_message, assistant_message])
        logger.info(
            f"Turn committed to conversation {conversation.id} "
            f"(intent={reply.intent}, products={len(reply.products)})"
        )

        return ChatResponse(conversation_id=conversation.id, message=assistant_message)

    async def get_conversations_by_user_id(self, user_id: str) -> list[Conversation]:
        return await self.conversation_db.get_conversations_by_user_id(user_id)

    async def get_conversation(self, user_id: str, conversation_id: str) -> Conversation:
        return await self.conversation_db.get_conversation(user_id, conversation_id)

    async def delete_conversation(self, user_id: str, conversation_id: str) -> bool:
        return await self.conversation_db.delete_conversation(user_id, conversation_id)

    def list_products(self, product_query: ProductQuery) -> ProductPage:
        return self.catalog.query(product_query)

    def get_product(self, product_id: str) -> Product:
        product = self.catalog.get_product_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product
