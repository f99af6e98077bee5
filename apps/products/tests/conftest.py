import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.accounts.models import User
from apps.accounts.services import get_token_issuer
from apps.products.models import Product


def _client_for(user):
    client = APIClient()
    client.cookies['auth_token'] = get_token_issuer().issue(user.username)
    return client


@pytest.fixture
def api_client():
    """Return an anonymous API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a customer account."""
    return User.objects.create_user(
        username='alice',
        password='password123',
        email='alice@example.com',
    )


@pytest.fixture
def shop_admin(db):
    """Create and return a shop administrator."""
    return User.objects.create_admin(
        username='admin',
        password='admin123',
        email='admin@example.com',
    )


@pytest.fixture
def customer_client(customer):
    """Return an API client logged in as a customer."""
    return _client_for(customer)


@pytest.fixture
def admin_client(shop_admin):
    """Return an API client logged in as a shop administrator."""
    return _client_for(shop_admin)


@pytest.fixture
def product(db):
    """Create and return a single coffee."""
    return Product.objects.create(
        name='Kenya AA',
        description='Blackcurrant and grapefruit.',
        price=Decimal('59.90'),
        stock_quantity=20,
        roast_level=1,
        caffeine_level=2,
        sweetness=2,
        acidity=3,
        weight='250g',
    )


@pytest.fixture
def catalog(db):
    """Create a small catalog with distinct sales counters."""
    return [
        Product.objects.create(name='Kenya AA', price=Decimal('59.90'), stock_quantity=20, sales=5),
        Product.objects.create(name='Brazil Santos', price=Decimal('39.90'), stock_quantity=60, sales=12),
        Product.objects.create(name='Colombia Huila', price=Decimal('49.90'), stock_quantity=35, sales=0),
        Product.objects.create(name='Kenya Peaberry', price=Decimal('64.90'), stock_quantity=8, sales=7),
    ]
