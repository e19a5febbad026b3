from storefront_toolkit.conversation_database.controller import (
    ChatResponse,
    MessageInput,
    ShoppingAssistantController,
)
from storefront_toolkit.conversation_database.data_models import Conversation, ConversationDatabase, Message, Roles
from storefront_toolkit.conversation_database.in_memory import InMemoryConversationDatabase

__all__ = [
    "ChatResponse",
    "Conversation",
    "ConversationDatabase",
    "InMemoryConversationDatabase",
    "Message",
    "MessageInput",
    "Roles",
    "ShoppingAssistantController",
]
