"""
Shared fixtures: in-memory app, test client and authenticated users.

The app fixture does not keep an app context pushed, so every request gets its
own context (and its own flask-login user). Tests that touch the database
directly open one with `with app.app_context():`.
"""
import pytest

from app import create_app, db


@pytest.fixture
def app():
    """App bound to a fresh in-memory SQLite database."""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register_user(client):
    """POST /api/register with overridable fields."""
    def _register(username='alice', email='alice@finance.org', password='s3cret-pass'):
        return client.post('/api/register', json={
            'username': username,
            'email': email,
            'password': password,
        })
    return _register


@pytest.fixture
def auth_headers(register_user):
    """Bearer headers for user 'alice'."""
    response = register_user()
    assert response.status_code == 201
    return {'Authorization': f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def other_headers(register_user):
    """Bearer headers for a second user 'bob' (isolation tests)."""
    response = register_user(username='bob', email='bob@finance.org')
    assert response.status_code == 201
    return {'Authorization': f"Bearer {response.get_json()['token']}"}
