"""
Shared pytest fixtures for expense ledger tests.
"""
import os
import sys

import pytest

# Add project root and tests directory to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
tests_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)
sys.path.insert(0, tests_dir)

# ============================================================================
# Configuration
# ============================================================================

# Centralized test user credentials (wire field names)
TEST_USERS = {
    'alice': {
        'email': 'alice@example.com',
        'senha': 'pw123',
    },
    'bob': {
        'email': 'bob@example.com',
        'senha': 'hunter2',
    },
}


def expense_payload(usuario_id, **overrides):
    """Build a valid POST /gastos body."""
    payload = {
        'descricao': 'Lunch',
        'valor': 25.5,
        'categoria': 'Food',
        'data': '2024-01-10',
        'usuarioId': usuario_id,
    }
    payload.update(overrides)
    return payload


# ============================================================================
# Flask App Fixtures
# ============================================================================

@pytest.fixture
def app():
    """Create a Flask app backed by a fresh in-memory database."""
    from app import create_app, close_db
    flask_app = create_app('testing')
    yield flask_app
    close_db(flask_app)


@pytest.fixture
def db(app):
    """Get database instance."""
    from extensions import db as _db
    return _db


@pytest.fixture
def app_context(app):
    """Provide app context for database operations."""
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    """Create test client for API tests."""
    return app.test_client()


@pytest.fixture
def account_service(app):
    return app.extensions['account_service']


@pytest.fixture
def ledger_service(app):
    return app.extensions['ledger_service']


# ============================================================================
# Helper Fixtures
# ============================================================================

@pytest.fixture
def register_user(client):
    """Factory fixture to register a test user via the API."""
    def _register(user_key: str):
        response = client.post('/register', json=TEST_USERS[user_key])
        assert response.status_code == 201
        return response.get_json()['userId']

    return _register


@pytest.fixture
def registered_user(app_context, account_service):
    """A user created through the account service, returned as its ID."""
    user = TEST_USERS['alice']
    return account_service.register(user['email'], user['senha'])
