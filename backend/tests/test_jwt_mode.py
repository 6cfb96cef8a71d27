"""End-to-end runs with signed, expiring JWT credentials."""

import jwt
import pytest
from conftest import wait_until
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from rtchat.config.settings import TestingConfig
from rtchat.domain.ports.realtime import SubscriptionRegistry
from rtchat.fastapi_app import create_fastapi_app
from rtchat.infrastructure.persistence.seed import CONVERSATION1_ID, USER1_ID


class JwtTestingConfig(TestingConfig):
    AUTH_TOKEN_MODE = "jwt"
    SERVICE_AUTH_SECRET = "test-secret"
    SERVICE_AUTH_ISSUER = "rtchat-tests"
    SERVICE_AUTH_AUDIENCE = "rtchat-test-clients"
    SERVICE_AUTH_TTL_SECONDS = 300


@pytest.fixture()
def jwt_app():
    return create_fastapi_app(JwtTestingConfig)


@pytest.fixture()
def jwt_client(jwt_app):
    with TestClient(jwt_app) as test_client:
        yield test_client


@pytest.fixture()
def user1_token(jwt_client, json_api_headers):
    res = jwt_client.post(
        "/authenticate",
        headers=json_api_headers,
        json={"data": {"type": "auth", "attributes": {"username": "user1", "password": "password1"}}},
    )
    assert res.status_code == 200
    return res.json()["meta"]["token"]


def test_authenticate_issues_signed_token(user1_token):
    claims = jwt.decode(
        user1_token,
        JwtTestingConfig.SERVICE_AUTH_SECRET,
        algorithms=["HS256"],
        audience=JwtTestingConfig.SERVICE_AUTH_AUDIENCE,
        issuer=JwtTestingConfig.SERVICE_AUTH_ISSUER,
    )

    assert claims["sub"] == USER1_ID.value
    assert claims["exp"] - claims["iat"] == JwtTestingConfig.SERVICE_AUTH_TTL_SECONDS


def test_signed_token_authorizes_rest_calls(jwt_client, json_api_headers, user1_token):
    res = jwt_client.get(
        "/conversations", headers={**json_api_headers, "Authorization": f"Bearer {user1_token}"}
    )

    assert res.status_code == 200
    assert [c["id"] for c in res.json()["data"]] == [CONVERSATION1_ID.value]


def test_bare_user_id_is_rejected(jwt_client, json_api_headers):
    res = jwt_client.get("/conversations", headers={**json_api_headers, "Authorization": USER1_ID.value})

    assert res.status_code == 401


def test_cable_accepts_signed_token(jwt_app, jwt_client, json_api_headers, user1_token):
    registry = jwt_client.portal.call(jwt_app.state.dishka_container.get, SubscriptionRegistry)
    url = f"/cable?conversationId={CONVERSATION1_ID.value}&token={user1_token}"

    with jwt_client.websocket_connect(url) as ws:
        assert wait_until(
            lambda: len(jwt_client.portal.call(registry.subscribers_of, CONVERSATION1_ID)) == 1
        )
        posted = jwt_client.post(
            f"/conversations/{CONVERSATION1_ID.value}",
            headers={**json_api_headers, "Authorization": user1_token},
            json={"data": {"type": "messages", "attributes": {"text": "signed hello"}}},
        )
        assert posted.status_code == 201

        event = ws.receive_json()

    assert event["data"]["id"] == posted.json()["data"]["id"]
    assert event["data"]["attributes"]["author"] == USER1_ID.value


def test_cable_rejects_bare_user_id(jwt_client):
    url = f"/cable?conversationId={CONVERSATION1_ID.value}&token={USER1_ID.value}"

    with jwt_client.websocket_connect(url) as ws:
        with pytest.raises(WebSocketDisconnect) as exc_info:
            ws.receive_text()

    assert exc_info.value.code == 1008
