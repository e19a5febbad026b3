"""
Scripted walk-through of the shopping assistant, without HTTP.

    python -m storefront_backend.demo
    RANDOM_SEED=7 python -m storefront_backend.demo

Two users chat with the assistant; the script then lists and deletes
conversations to show per-user scoping. Each step is logged with loguru.
"""

import asyncio

from loguru import logger

from storefront_backend.app import build_controller, configure_logging
from storefront_toolkit.conversation_database.controller import MessageInput, ShoppingAssistantController
from storefront_toolkit.exceptions import NotFoundError

ALICE_MESSAGES = [
    "hello",
    "show me phones under $100",
    "I need a cheap laptop",
    "surprise me",
]
BOB_MESSAGES = [
    "what can you do",
    "luxury gifts please",
]


async def chat(controller: ShoppingAssistantController, user_id: str, messages: list[str]) -> str | None:
    conversation_id = None
    for text in messages:
        response = await controller.process_new_message(
            MessageInput(message=text, conversation_id=conversation_id), user_id
        )
        conversation_id = response.conversation_id
        names = ", ".join(product.name for product in response.message.products) or "-"
        logger.info(f"[{user_id}] {text!r} -> {response.message.content.splitlines()[0]!r} | {names}")
    return conversation_id


async def main() -> None:
    configure_logging()
    controller = build_controller()

    alice_conversation = await chat(controller, "alice", ALICE_MESSAGES)
    await chat(controller, "bob", BOB_MESSAGES)

    for user_id in ("alice", "bob"):
        conversations = await controller.get_conversations_by_user_id(user_id)
        logger.info(f"{user_id} has {len(conversations)} conversation(s)")

    if alice_conversation is None:
        return
    try:
        await controller.delete_conversation("bob", alice_conversation)
    except NotFoundError as exc:
        logger.info(f"bob cannot delete alice's conversation: {exc}")

    await controller.delete_conversation("alice", alice_conversation)
    logger.info(f"alice now has {len(await controller.get_conversations_by_user_id('alice'))} conversation(s)")


if __name__ == "__main__":
    asyncio.run(main())
