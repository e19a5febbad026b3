"""
In-memory conversation storage.

Conversations live in a process-wide dict for the lifetime of the database
object. Each conversation id has its own 'asyncio.Lock': appends, deletes and
snapshot reads of the same conversation are serialised, while different
conversations never wait on each other. Reads return deep copies so callers
cannot mutate stored state or observe a later append.

A lock exists exactly as long as its conversation: it is created in
'create_conversation' and dropped in 'delete_conversation'. Lookups of unknown
ids fail without allocating anything.
"""

import asyncio
from collections.abc import Sequence

from loguru import logger

from storefront_toolkit.conversation_database.data_models.conversation import Conversation, ConversationDatabase
from storefront_toolkit.conversation_database.data_models.message import Message
from storefront_toolkit.exceptions import NotFoundError
from storefront_toolkit.utils.time import get_current_timestamp


class InMemoryConversationDatabase(ConversationDatabase):
    def __init__(self) -> None:
        self._conversations: dict[str, Conversation] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock(self, conversation_id: str) -> asyncio.Lock:
        lock = self._locks.get(conversation_id)
        if lock is None:
            raise NotFoundError(f"Conversation {conversation_id} not found")
        return lock

    def _owned(self, user_id: str, conversation_id: str) -> Conversation:
        conversation = self._conversations.get(conversation_id)
        if conversation is None or conversation.user_id != user_id:
            raise NotFoundError(f"Conversation {conversation_id} not found")
        return conversation

    async def create_conversation(self, conversation: Conversation) -> Conversation:
        if conversation.id in self._locks:
            raise ValueError(f"Conversation with id {conversation.id} already exists")
        self._locks[conversation.id] = asyncio.Lock()
        self._conversations[conversation.id] = conversation.model_copy(deep=True)
        return conversation.model_copy(deep=True)

    async def get_conversation(self, user_id: str, conversation_id: str) -> Conversation:
        async with self._lock(conversation_id):
            return self._owned(user_id, conversation_id).model_copy(deep=True)

    async def get_conversations_by_user_id(self, user_id: str) -> list[Conversation]:
        candidate_ids = [c.id for c in self._conversations.values() if c.user_id == user_id]
        snapshots: list[Conversation] = []
        for conversation_id in candidate_ids:
            lock = self._locks.get(conversation_id)
            if lock is None:
                continue
            async with lock:
                conversation = self._conversations.get(conversation_id)
                if conversation is not None:
                    snapshots.append(conversation.model_copy(deep=True))
        return sorted(snapshots, key=lambda c: c.update_timestamp, reverse=True)

    async def append_messages(self, conversation_id: str, messages: Sequence[Message]) -> Conversation:
        async with self._lock(conversation_id):
            conversation = self._conversations.get(conversation_id)
            if conversation is None:
                raise NotFoundError(f"Conversation {conversation_id} not found")

            known_ids = {message.id for message in conversation.messages}
            new_ids = [message.id for message in messages]
            if len(set(new_ids)) != len(new_ids) or known_ids.intersection(new_ids):
                raise ValueError(f"Duplicate message id in conversation {conversation_id}")

            conversation.messages.extend(messages)
            conversation.update_timestamp = max(conversation.update_timestamp, get_current_timestamp())
            return conversation.model_copy(deep=True)

    async def delete_conversation(self, user_id: str, conversation_id: str) -> bool:
        async with self._lock(conversation_id):
            self._owned(user_id, conversation_id)
            del self._conversations[conversation_id]
            self._locks.pop(conversation_id, None)
        logger.info(f"Deleted conversation {conversation_id} for user {user_id}")
        return True
