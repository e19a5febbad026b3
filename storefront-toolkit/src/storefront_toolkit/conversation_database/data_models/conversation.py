"""
Conversation data model and storage interface.

The 'ConversationDatabase' ABC is the pluggable storage backend for
conversations and the messages they own. Every lookup and mutation that comes
from a user request is scoped by 'user_id'; a conversation is never visible to
anyone but its owner. 'InMemoryConversationDatabase' is the shipped
implementation.

Implementations must serialise mutations of the same conversation and must
never hand out a conversation whose 'update_timestamp' and 'messages' disagree.
'append_messages' is the unit of atomicity: the controller commits a whole
turn (user message and assistant reply) with a single call.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from storefront_toolkit.conversation_database.data_models.message import Message
from storefront_toolkit.exceptions import NotFoundError
from storefront_toolkit.utils.database import generate_uid
from storefront_toolkit.utils.time import get_current_timestamp


class Conversation(BaseModel):
    """A dialogue owned by a single user. Messages are kept in insertion order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userId")
    messages: list[Message] = Field(default_factory=list)
    create_timestamp: int = Field(alias="createdAt")
    update_timestamp: int = Field(alias="updatedAt")


class ConversationDatabase(ABC):
    """Abstract repository for 'Conversation' records."""

    @abstractmethod
    async def create_conversation(self, conversation: Conversation) -> Conversation:
        pass

    @abstractmethod
    async def get_conversation(self, user_id: str, conversation_id: str) -> Conversation:
        """Return a snapshot of the conversation. Raises 'NotFoundError' if missing or not owned by 'user_id'."""
        pass

    @abstractmethod
    async def get_conversations_by_user_id(self, user_id: str) -> list[Conversation]:
        """Return snapshots of the user's conversations, most recently updated first."""
        pass

    @abstractmethod
    async def append_messages(self, conversation_id: str, messages: Sequence[Message]) -> Conversation:
        """Append 'messages' in order and advance 'update_timestamp', as one atomic step."""
        pass

    @abstractmethod
    async def delete_conversation(self, user_id: str, conversation_id: str) -> bool:
        """Delete an owned conversation and all of its messages. Raises 'NotFoundError' otherwise."""
        pass

    async def append_message(self, conversation_id: str, message: Message) -> Conversation:
        return await self.append_messages(conversation_id, [message])

    async def find_or_create(self, user_id: str, conversation_id: str | None = None) -> Conversation:
        """
        Return the user's conversation 'conversation_id', or a new empty one.

        A new conversation always gets a freshly generated id: a supplied id
        that is unknown, or owned by another user, is never reused. Callers can
        therefore tell a fresh conversation apart by comparing ids.
        """
        if conversation_id is not None:
            try:
                return await self.get_conversation(user_id, conversation_id)
            except NotFoundError:
                logger.warning(f"Conversation {conversation_id} not found for user {user_id}, starting a new one")

        now = get_current_timestamp()
        conversation = await self.create_conversation(
            Conversation(
                id=generate_uid(),
                user_id=user_id,
                messages=[],
                create_timestamp=now,
                update_timestamp=now,
            )
        )
        logger.info(f"Created conversation {conversation.id} for user {user_id}")
        return conversation
