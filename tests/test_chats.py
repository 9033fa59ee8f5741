import uuid

from sqlalchemy.exc import OperationalError

from app.api.chat import services
from app.config import settings


def create_chat(client, headers):
    response = client.post("/api/chats", headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_new_chat_is_empty_and_owned_by_caller(client, alice):
    chat = create_chat(client, alice["headers"])

    assert chat["title"] == "New Chat"
    assert chat["messages"] == []
    assert chat["userId"] == alice["user"]["id"]
    assert chat["createdAt"] and chat["updatedAt"]


def test_list_chats_returns_summaries_newest_update_first(client, alice):
    first = create_chat(client, alice["headers"])
    second = create_chat(client, alice["headers"])

    client.post(
        f"/api/chats/{first['id']}/messages",
        json={"message": "hello"},
        headers=alice["headers"],
    )

    response = client.get("/api/chats", headers=alice["headers"])

    assert response.status_code == 200
    chats = response.json()
    assert [c["id"] for c in chats] == [first["id"], second["id"]]
    assert set(chats[0]) == {"id", "title", "createdAt", "updatedAt"}


def test_list_chats_only_shows_own_chats(client, alice, bob):
    create_chat(client, alice["headers"])

    response = client.get("/api/chats", headers=bob["headers"])

    assert response.status_code == 200
    assert response.json() == []


def test_get_chat_is_repeatable(client, alice):
    chat = create_chat(client, alice["headers"])
    client.post(
        f"/api/chats/{chat['id']}/messages",
        json={"message": "any deals today?"},
        headers=alice["headers"],
    )

    first = client.get(f"/api/chats/{chat['id']}", headers=alice["headers"])
    second = client.get(f"/api/chats/{chat['id']}", headers=alice["headers"])

    assert first.status_code == 200
    assert first.json() == second.json()
    assert [m["role"] for m in first.json()["messages"]] == ["user", "assistant"]


def test_unknown_or_malformed_chat_id_is_not_found(client, alice):
    missing = client.get(f"/api/chats/{uuid.uuid4()}", headers=alice["headers"])
    malformed = client.get("/api/chats/not-a-uuid", headers=alice["headers"])

    assert missing.status_code == 404
    assert missing.json() == {"error": "Chat not found"}
    assert malformed.status_code == 404


def test_rename_chat_trims_title(client, alice):
    chat = create_chat(client, alice["headers"])

    response = client.put(
        f"/api/chats/{chat['id']}/title",
        json={"title": "  Weekend plans  "},
        headers=alice["headers"],
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Chat title updated successfully"
    assert body["chat"]["title"] == "Weekend plans"


def test_rename_chat_requires_title(client, alice):
    chat = create_chat(client, alice["headers"])

    blank = client.put(f"/api/chats/{chat['id']}/title", json={"title": "   "}, headers=alice["headers"])
    missing = client.put(f"/api/chats/{chat['id']}/title", json={}, headers=alice["headers"])

    assert blank.status_code == missing.status_code == 400
    assert blank.json() == {"error": "Title is required"}


def test_delete_chat(client, alice):
    chat = create_chat(client, alice["headers"])

    response = client.delete(f"/api/chats/{chat['id']}", headers=alice["headers"])

    assert response.status_code == 200
    assert response.json() == {"message": "Chat deleted successfully"}
    assert client.get(f"/api/chats/{chat['id']}", headers=alice["headers"]).status_code == 404
    assert client.delete(f"/api/chats/{chat['id']}", headers=alice["headers"]).status_code == 404


def test_other_users_cannot_touch_a_chat(client, alice, bob):
    chat = create_chat(client, alice["headers"])
    chat_url = f"/api/chats/{chat['id']}"

    responses = [
        client.get(chat_url, headers=bob["headers"]),
        client.put(f"{chat_url}/title", json={"title": "mine now"}, headers=bob["headers"]),
        client.post(f"{chat_url}/messages", json={"message": "hi"}, headers=bob["headers"]),
        client.delete(chat_url, headers=bob["headers"]),
    ]

    for response in responses:
        assert response.status_code == 404
        assert response.json() == {"error": "Chat not found"}

    untouched = client.get(chat_url, headers=alice["headers"]).json()
    assert untouched["title"] == "New Chat"
    assert untouched["messages"] == []


def test_chat_timestamps_are_sent_as_utc(client, alice):
    chat = create_chat(client, alice["headers"])
    exchange = client.post(
        f"/api/chats/{chat['id']}/messages",
        json={"message": "hello"},
        headers=alice["headers"],
    ).json()

    stored = client.get(f"/api/chats/{chat['id']}", headers=alice["headers"]).json()

    assert chat["createdAt"].endswith("Z")
    assert exchange["userMessage"]["timestamp"].endswith("Z")
    assert stored["updatedAt"].endswith("Z")
    assert all(m["timestamp"].endswith("Z") for m in stored["messages"])


def test_store_failure_is_a_json_500_with_cors_headers(client, alice, monkeypatch):
    def broken(db, user_id):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    monkeypatch.setattr(services, "list_user_chats", broken)

    response = client.get(
        "/api/chats",
        headers={**alice["headers"], "Origin": settings.CORS_ORIGIN},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Server error"}
    assert response.headers["access-control-allow-origin"] == settings.CORS_ORIGIN
