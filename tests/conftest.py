"""
Pytest configuration and fixtures for player gateway tests.
"""
import base64
import os
import sys
import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

# Set testing environment before importing app
os.environ['FLASK_ENV'] = 'testing'

from gateway.app import create_app
from gateway.player_registry import PlayerRegistry

FAST_HASH = 'pbkdf2:sha256:1000'


def basic_auth(user: str, password: str) -> dict:
    """Build an HTTP Basic Authorization header."""
    token = base64.b64encode(f"{user}:{password}".encode('utf-8')).decode('ascii')
    return {'Authorization': f'Basic {token}'}


@pytest.fixture(scope='function')
def app():
    """Create a fresh application (and registry) for every test."""
    app = create_app('testing')
    yield app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def auth():
    """Factory for Basic Authorization headers."""
    return basic_auth


@pytest.fixture
def admin_headers():
    return basic_auth('admin', 'admin')


@pytest.fixture
def registered_player(client):
    """Register player@provider.com and return (email, password)."""
    response = client.post('/player/register', query_string={
        'email': 'player@provider.com',
        'pseudo': 'player',
        'serverURL': 'http://localhost'
    })
    assert response.status_code == 200
    return 'player@provider.com', response.get_data(as_text=True)


@pytest.fixture
def player_headers(registered_player):
    email, password = registered_player
    return basic_auth(email, password)


@pytest.fixture
def mock_publisher(mocker):
    """Mock event publisher."""
    publisher = mocker.MagicMock()
    publisher.publish_player_event = mocker.MagicMock()
    return publisher


@pytest.fixture
def mock_server_client(mocker):
    """Mock player server client."""
    client = mocker.MagicMock()
    client.notify_reset = mocker.MagicMock(return_value=True)
    return client


@pytest.fixture
def registry(mock_publisher, mock_server_client):
    """Registry wired to mocked collaborators."""
    return PlayerRegistry(
        max_number_of_users=3,
        publisher=mock_publisher,
        server_client=mock_server_client,
        hash_method=FAST_HASH
    )
