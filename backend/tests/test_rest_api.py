import time

import pytest
from conftest import JSON_API, wait_until

from rtchat.config.settings import TestingConfig
from rtchat.infrastructure.persistence.seed import (
    CONVERSATION1_ID,
    CONVERSATION2_ID,
    USER1_ID,
)

REPLY_TEXT = "AI: I'm sorry, I don't understand. Can you please rephrase that?"


def _auth_body(username, password):
    return {"data": {"type": "auth", "attributes": {"username": username, "password": password}}}


def _message_body(text):
    return {"data": {"type": "messages", "attributes": {"text": text}}}


def _error_code(response):
    return response.json()["errors"][0]["code"]


# ==================== AUTHENTICATE ====================


def test_authenticate_returns_token(client, json_api_headers):
    res = client.post("/authenticate", headers=json_api_headers, json=_auth_body("user1", "password1"))

    assert res.status_code == 200
    assert res.headers["content-type"].startswith(JSON_API)
    assert res.json() == {"meta": {"token": USER1_ID.value}}


def test_authenticate_rejects_bad_password(client, json_api_headers):
    res = client.post("/authenticate", headers=json_api_headers, json=_auth_body("user1", "nope"))

    assert res.status_code == 401
    assert res.headers["content-type"].startswith(JSON_API)
    error = res.json()["errors"][0]
    assert error["status"] == "401"
    assert error["code"] == "InvalidCredentials"


def test_authenticate_requires_json_api_content_type(client):
    res = client.post(
        "/authenticate",
        headers={"Content-Type": "application/json"},
        json=_auth_body("user1", "password1"),
    )

    assert res.status_code == 415
    assert _error_code(res) == "UnsupportedMediaType"


def test_malformed_body_is_bad_request(client, json_api_headers):
    res = client.post("/authenticate", headers=json_api_headers, json={"username": "user1"})

    assert res.status_code == 400
    assert _error_code(res) == "BadRequest"


# ==================== CHECK ORDER ====================


@pytest.mark.parametrize(
    "path", ["/conversations", f"/conversations/{CONVERSATION1_ID.value}"]
)
def test_credential_checked_before_body(client, json_api_headers, path):
    for headers in (json_api_headers, {**json_api_headers, "Authorization": "garbage"}):
        res = client.post(path, headers=headers, content=b"{not json")
        assert res.status_code == 401
        assert _error_code(res) == "Unauthorized"


@pytest.mark.parametrize(
    "path", ["/conversations", f"/conversations/{CONVERSATION1_ID.value}"]
)
def test_malformed_document_with_valid_credential_is_bad_request(client, user1_headers, path):
    res = client.post(path, headers=user1_headers, content=b"{not json")

    assert res.status_code == 400
    assert _error_code(res) == "BadRequest"

    res = client.post(path, headers=user1_headers, json={"data": {"attributes": {}}})
    assert res.status_code == 400


def test_media_type_checked_before_credential(client):
    res = client.get(
        "/conversations",
        headers={"Accept": "text/html", "Authorization": "garbage"},
    )

    assert res.status_code == 415


def test_wildcard_accept_is_admitted(client, user1_headers):
    res = client.get("/conversations", headers={**user1_headers, "Accept": "*/*"})

    assert res.status_code == 200


@pytest.mark.parametrize("authorization", [None, "garbage", "00000000-0000-4000-8000-000000000000"])
def test_missing_or_invalid_credential_is_unauthorized(client, json_api_headers, authorization):
    headers = dict(json_api_headers)
    if authorization is not None:
        headers["Authorization"] = authorization

    res = client.get("/conversations", headers=headers)

    assert res.status_code == 401
    assert _error_code(res) == "Unauthorized"


def test_invalid_credential_does_not_mutate(client, json_api_headers, user1_headers):
    res = client.post(
        f"/conversations/{CONVERSATION1_ID.value}",
        headers={**json_api_headers, "Authorization": "garbage"},
        json=_message_body("sneaky"),
    )
    assert res.status_code == 401

    conversation = client.get(f"/conversations/{CONVERSATION1_ID.value}", headers=user1_headers).json()
    assert [m["text"] for m in conversation["data"]["attributes"]["messages"]] == ["Hello, World!"]


def test_unknown_conversation_is_not_found(client, user1_headers):
    for conversation_id in ("00000000-0000-4000-8000-000000000000", "not-a-uuid"):
        res = client.get(f"/conversations/{conversation_id}", headers=user1_headers)
        assert res.status_code == 404
        assert _error_code(res) == "NotFound"


def test_other_users_conversation_is_forbidden(client, user1_headers):
    res = client.get(f"/conversations/{CONVERSATION2_ID.value}", headers=user1_headers)

    assert res.status_code == 403
    assert _error_code(res) == "Forbidden"


def test_posting_to_other_users_conversation_is_forbidden(client, user1_headers, user2_headers):
    res = client.post(
        f"/conversations/{CONVERSATION2_ID.value}",
        headers=user1_headers,
        json=_message_body("hi"),
    )
    assert res.status_code == 403

    conversation = client.get(f"/conversations/{CONVERSATION2_ID.value}", headers=user2_headers).json()
    assert len(conversation["data"]["attributes"]["messages"]) == 1


# ==================== CONVERSATIONS ====================


def test_list_only_own_conversations(client, user1_headers):
    res = client.get("/conversations", headers=user1_headers)

    assert res.status_code == 200
    data = res.json()["data"]
    assert [c["id"] for c in data] == [CONVERSATION1_ID.value]
    assert data[0]["type"] == "conversations"
    assert data[0]["attributes"]["author"] == USER1_ID.value


def test_bearer_prefix_is_accepted(client, json_api_headers):
    res = client.get(
        "/conversations",
        headers={**json_api_headers, "Authorization": f"Bearer {USER1_ID.value}"},
    )

    assert res.status_code == 200


def test_full_conversation_flow(client, json_api_headers):
    token = client.post(
        "/authenticate", headers=json_api_headers, json=_auth_body("user1", "password1")
    ).json()["meta"]["token"]
    headers = {**json_api_headers, "Authorization": token}

    created = client.post(
        "/conversations",
        headers=headers,
        json={"data": {"type": "conversations", "attributes": {"name": "Test"}}},
    )
    assert created.status_code == 201
    conversation = created.json()["data"]
    assert conversation["attributes"]["name"] == "Test"
    assert [m["author"] for m in conversation["attributes"]["messages"]] == ["AI"]
    conversation_url = f"/conversations/{conversation['id']}"

    posted = client.post(conversation_url, headers=headers, json=_message_body("hi"))
    assert posted.status_code == 201
    message = posted.json()["data"]
    assert message["type"] == "messages"
    assert message["attributes"] == {"text": "hi", "author": token}

    def messages():
        return client.get(conversation_url, headers=headers).json()["data"]["attributes"]["messages"]

    assert wait_until(lambda: len(messages()) == 3)
    final = messages()
    assert [m["author"] for m in final] == ["AI", token, "AI"]
    assert final[1]["id"] == message["id"]
    assert final[2]["text"] == REPLY_TEXT

    listed = client.get("/conversations", headers=headers).json()["data"]
    assert [c["id"] for c in listed] == [CONVERSATION1_ID.value, conversation["id"]]


def test_burst_of_messages_gets_one_reply(client, user1_headers):
    url = f"/conversations/{CONVERSATION1_ID.value}"
    for text in ("one", "two", "three"):
        assert client.post(url, headers=user1_headers, json=_message_body(text)).status_code == 201

    def authors():
        messages = client.get(url, headers=user1_headers).json()["data"]["attributes"]["messages"]
        return [m["author"] for m in messages]

    assert wait_until(lambda: "AI" in authors())
    # let the remaining stale timers fire
    time.sleep(TestingConfig.AUTO_REPLY_DELAY_SECONDS * 4)
    assert authors().count("AI") == 1


def test_empty_message_text_is_bad_request(client, user1_headers):
    res = client.post(
        f"/conversations/{CONVERSATION1_ID.value}",
        headers=user1_headers,
        json=_message_body(""),
    )

    assert res.status_code == 400


# ==================== OPERATIONAL ====================


def test_health_and_metrics(client, user1_headers):
    client.get("/conversations", headers=user1_headers)

    assert client.get("/health").json() == {"status": "healthy"}
    metrics = client.get("/metrics")
    assert metrics.status_code == 200
    assert "http_server_request_duration_seconds" in metrics.text


def test_unknown_route_is_json_api_error(client):
    res = client.get("/nowhere")

    assert res.status_code == 404
    assert res.headers["content-type"].startswith(JSON_API)
    assert _error_code(res) == "NotFound"


def test_correlation_id_is_echoed(client, user1_headers):
    res = client.get("/conversations", headers={**user1_headers, "X-Correlation-ID": "abc-123"})

    assert res.headers["X-Correlation-ID"] == "abc-123"
