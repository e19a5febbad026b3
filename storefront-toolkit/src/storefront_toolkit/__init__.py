"""
Storefront toolkit: a rule-based shopping assistant with per-user conversation storage.

    from storefront_toolkit.agents import ShoppingAgent
    from storefront_toolkit.catalog import InMemoryProductCatalog
    from storefront_toolkit.conversation_database import (
        InMemoryConversationDatabase,
        MessageInput,
        ShoppingAssistantController,
    )
"""
