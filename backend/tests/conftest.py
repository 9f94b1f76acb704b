"""
Pytest configuration and shared fixtures for the relay tests.
"""
from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from order_relay.config import Settings
from order_relay.main import create_app

from .helpers import UPSTREAM_URL, make_response


@pytest.fixture
def test_settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        WS_TOKEN="ws_initial",
        UPSTREAM_GRAB_URL=UPSTREAM_URL,
    )

@pytest.fixture
def upstream():
    """Mocked requests.Session standing in for the order endpoint."""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(200, {"code": 0, "msg": "ok"})
    return session

@pytest.fixture
def app(test_settings, upstream):
    return create_app(test_settings, session=upstream)

@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def registered(client):
    """Register client "c1" and return its config payload."""
    body = {"clientId": "c1", "key": "k", "version": "v1", "token": "t1"}
    resp = client.post("/api/config", json=body)
    assert resp.status_code == 200
    return body
