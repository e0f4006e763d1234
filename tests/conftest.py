import json
from unittest.mock import MagicMock, Mock, patch

import pytest

from huelink.api.http_client import HttpClient
from huelink.api.portal import Portal

BRIDGE_IP = "10.0.0.5"
USERNAME = "abc123"
USER_URL = f"http://{BRIDGE_IP}/api/{USERNAME}"


@pytest.fixture
def mock_session():
    """Replace requests.Session inside the transport with a MagicMock."""
    with patch("huelink.api.http_client.requests.Session") as mock:
        session = MagicMock()
        mock.return_value = session
        yield session


@pytest.fixture
def respond(mock_session):
    """Set the JSON body (or a raw non-JSON text) the next requests answer with."""

    def _respond(json_data=None, status_code=200, text=None):
        response = Mock()
        response.status_code = status_code
        if text is not None:
            response.text = text
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.text = json.dumps(json_data)
            response.json.return_value = json_data
        mock_session.request.return_value = response
        return response

    return _respond


@pytest.fixture
def sent(mock_session):
    """Return ``(method, url, body)`` of every request made so far."""

    def _sent():
        return [
            (call.args[0], call.args[1], call.kwargs["data"])
            for call in mock_session.request.call_args_list
        ]

    return _sent


@pytest.fixture
def client(mock_session):
    return HttpClient()


@pytest.fixture
def portal(client):
    return Portal(client)


@pytest.fixture
def bridge(portal):
    return portal.bridge(BRIDGE_IP)


@pytest.fixture
def user(bridge):
    return bridge.user(USERNAME)
