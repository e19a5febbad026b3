import pytest
from fastapi.testclient import TestClient
from loguru import logger

from storefront_toolkit.api.auth.header import HeaderAuthProvider
from storefront_toolkit.api.server import create_app
from storefront_toolkit.conversation_database.controller import ShoppingAssistantController
from storefront_toolkit.conversation_database.in_memory import InMemoryConversationDatabase

ALICE = {"Authorization": "Bearer alice"}
BOB = {"X-User-Id": "bob"}


@pytest.fixture
def client(controller):
    with TestClient(create_app(controller, HeaderAuthProvider())) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "assistant": "Rule-based product recommendations", "products": 15}


def test_chat_requires_identity(client):
    response = client.post("/api/chat", json={"message": "hello"})
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}


def test_chat_rejects_empty_message(client):
    response = client.post("/api/chat", json={"message": "  "}, headers=ALICE)
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}

    assert client.post("/api/chat", json={}, headers=ALICE).status_code == 400
    assert client.get("/api/conversations", headers=ALICE).json() == []


def test_chat_round_trip_uses_client_field_names(client):
    response = client.post("/api/chat", json={"message": "I need a cheap laptop"}, headers=ALICE)
    assert response.status_code == 200
    body = response.json()

    assert set(body) == {"conversationId", "message"}
    message = body["message"]
    assert message["role"] == "assistant"
    assert message["content"].startswith("I found some great laptops")
    assert "timestamp" in message
    assert [p["id"] for p in message["products"]] == ["p1", "p2", "p3"]
    assert {"reviews", "inStock", "image"} <= set(message["products"][0])

    follow_up = client.post(
        "/api/chat", json={"message": "help", "conversationId": body["conversationId"]}, headers=ALICE
    )
    assert follow_up.json()["conversationId"] == body["conversationId"]
    assert follow_up.json()["message"]["products"] == []


def test_conversations_are_listed_per_user(client):
    client.post("/api/chat", json={"message": "hello"}, headers=ALICE)
    client.post("/api/chat", json={"message": "books"}, headers=ALICE)
    client.post("/api/chat", json={"message": "hello"}, headers=BOB)

    conversations = client.get("/api/conversations", headers=ALICE).json()
    assert len(conversations) == 2
    assert all(c["userId"] == "alice" for c in conversations)
    assert conversations[0]["updatedAt"] >= conversations[1]["updatedAt"]
    assert {"id", "messages", "createdAt", "updatedAt"} <= set(conversations[0])


def test_get_conversation_is_scoped(client):
    conversation_id = client.post("/api/chat", json={"message": "hello"}, headers=ALICE).json()["conversationId"]

    assert client.get(f"/api/conversations/{conversation_id}", headers=ALICE).status_code == 200
    assert client.get(f"/api/conversations/{conversation_id}", headers=BOB).status_code == 404


def test_delete_conversation(client):
    conversation_id = client.post("/api/chat", json={"message": "hello"}, headers=ALICE).json()["conversationId"]

    response = client.delete(f"/api/conversations/{conversation_id}", headers=BOB)
    assert response.status_code == 404
    assert "not found" in response.json()["error"]
    assert len(client.get("/api/conversations", headers=ALICE).json()) == 1

    response = client.delete(f"/api/conversations/{conversation_id}", headers=ALICE)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert client.get("/api/conversations", headers=ALICE).json() == []


def test_list_products_with_filters(client):
    body = client.get("/api/products", params={"category": "Books", "maxPrice": 20, "limit": 1}).json()
    assert body["total"] == 2
    assert body["hasMore"] is True
    assert len(body["products"]) == 1


def test_get_product(client):
    assert client.get("/api/products/p7").json()["name"] == "Sci-Fi Novel"
    response = client.get("/api/products/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "Product nope not found"}


def test_malformed_requests_use_error_shape(client):
    for response in (
        client.post("/api/chat", headers=ALICE),
        client.post("/api/chat", json={"message": 5}, headers=ALICE),
        client.get("/api/products", params={"limit": "abc"}),
        client.get("/api/products", params={"minPrice": -1}),
    ):
        assert response.status_code == 400
        assert set(response.json()) == {"error"}
        assert response.json()["error"].startswith("Invalid request")

    assert "limit" in client.get("/api/products", params={"limit": "abc"}).json()["error"]
    assert client.get("/api/conversations", headers=ALICE).json() == []


class BrokenConversationDatabase(InMemoryConversationDatabase):
    async def get_conversations_by_user_id(self, user_id):
        raise RuntimeError("storage unavailable")


def test_unexpected_errors_return_json_500(agent, catalog):
    controller = ShoppingAssistantController(
        conversation_db=BrokenConversationDatabase(), agent=agent, catalog=catalog
    )
    with TestClient(create_app(controller, HeaderAuthProvider()), raise_server_exceptions=False) as broken_client:
        response = broken_client.get("/api/conversations", headers=ALICE)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_header_identity_resolution(client):
    both = {"Authorization": "Bearer alice", "X-User-Id": "bob"}
    client.post("/api/chat", json={"message": "hello"}, headers=both)

    assert len(client.get("/api/conversations", headers=ALICE).json()) == 1
    assert client.get("/api/conversations", headers=BOB).json() == []

    for headers in ({"Authorization": "Bearer "}, {"Authorization": "Basic alice"}, {"X-User-Id": "  "}):
        response = client.get("/api/conversations", headers=headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}


def test_header_provider_warns_it_is_unverified(controller):
    messages = []
    sink_id = logger.add(messages.append, level="WARNING", format="{message}")
    try:
        create_app(controller, HeaderAuthProvider())
    finally:
        logger.remove(sink_id)

    assert any("development only" in message for message in messages)
