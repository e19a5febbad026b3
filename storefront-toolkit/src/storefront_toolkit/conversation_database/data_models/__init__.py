from storefront_toolkit.conversation_database.data_models.conversation import Conversation, ConversationDatabase
from storefront_toolkit.conversation_database.data_models.message import Message, Roles

__all__ = [
    "Conversation",
    "ConversationDatabase",
    "Message",
    "Roles",
]
