import os
import sys
import time

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from fastapi.testclient import TestClient

from rtchat.config.settings import TestingConfig
from rtchat.fastapi_app import create_fastapi_app
from rtchat.infrastructure.persistence.seed import USER1_ID, USER2_ID

JSON_API = "application/vnd.api+json"


def wait_until(predicate, timeout=2.0, interval=0.01):
    """Poll predicate until it holds or timeout elapses; returns its last value."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture()
def app():
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(TestingConfig)


@pytest.fixture()
def client(app):
    """
    A test client for the FastAPI app.

    Used as a context manager so lifespan runs and every request, websocket
    and background task shares one event loop.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def json_api_headers():
    return {"Content-Type": JSON_API, "Accept": JSON_API}


@pytest.fixture()
def user1_headers(json_api_headers):
    """Headers for user1 (opaque token == user id)."""
    return {**json_api_headers, "Authorization": USER1_ID.value}


@pytest.fixture()
def user2_headers(json_api_headers):
    return {**json_api_headers, "Authorization": f"Bearer {USER2_ID.value}"}
