import pytest
from rest_framework.test import APIClient

from apps.accounts.models import User
from apps.accounts.services import get_token_issuer


@pytest.fixture
def api_client():
    """Return an API client without a session cookie."""
    return APIClient()


@pytest.fixture
def issuer():
    """Return the session token issuer configured for tests."""
    return get_token_issuer()


@pytest.fixture
def user(db):
    """Create and return a customer account."""
    return User.objects.create_user(
        username='alice',
        password='password123',
        email='alice@example.com',
    )


@pytest.fixture
def admin_user(db):
    """Create and return a shop administrator."""
    return User.objects.create_admin(
        username='admin',
        password='admin123',
        email='admin@example.com',
    )


@pytest.fixture
def authenticated_client(api_client, user, issuer):
    """Return an API client carrying a valid auth_token cookie for ``user``."""
    api_client.cookies['auth_token'] = issuer.issue(user.username)
    return api_client
