import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.accounts.models import User
from apps.accounts.services import get_token_issuer
from apps.products.models import Product


@pytest.fixture
def api_client():
    """Return an anonymous API client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Create and return a customer with an email address."""
    return User.objects.create_user(
        username='alice',
        password='password123',
        email='alice@example.com',
    )


@pytest.fixture
def customer_client(api_client, customer):
    """Return an API client logged in as ``customer``."""
    api_client.cookies['auth_token'] = get_token_issuer().issue(customer.username)
    return api_client


@pytest.fixture
def product_p(db):
    """Ten units at 20.00 each, nothing sold yet."""
    return Product.objects.create(name='P', price=Decimal('20.00'), stock_quantity=10, sales=0)


@pytest.fixture
def product_a(db):
    """Five units in stock."""
    return Product.objects.create(name='A', price=Decimal('15.50'), stock_quantity=5, sales=0)


@pytest.fixture
def product_b(db):
    """Sold out."""
    return Product.objects.create(name='B', price=Decimal('30.00'), stock_quantity=0, sales=4)
