import pytest
from datetime import timedelta
from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from apps.accounts.services import get_token_issuer


# =============================================================================
# Authentication Tests
# =============================================================================

@pytest.mark.django_db
class TestOrderAuthentication:
    """POST /api/order/create requires a valid session cookie"""

    def test_anonymous_rejected(self, api_client, product_p):
        url = reverse('orders:create')
        response = api_client.post(url, [{'productId': product_p.id, 'quantity': 1}], format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['kind'] == 'unauthorized'
        assert response.data['message'] == 'order.notLoggedIn'

        product_p.refresh_from_db()
        assert product_p.stock_quantity == 10

    def test_expired_cookie_rejected(self, api_client, customer, product_p):
        issued_at = timezone.now() - timedelta(hours=25)
        api_client.cookies['auth_token'] = get_token_issuer().issue(customer.username, now=issued_at)

        url = reverse('orders:create')
        response = api_client.post(url, [{'productId': product_p.id, 'quantity': 1}], format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['message'] == 'order.notLoggedIn'

    def test_tampered_cookie_rejected(self, api_client, customer, product_p):
        api_client.cookies['auth_token'] = 'eyJhbGciOiJIUzI1NiJ9.e30.invalid'

        url = reverse('orders:create')
        response = api_client.post(url, [{'productId': product_p.id, 'quantity': 1}], format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Order Placement Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateOrder:
    """Tests for POST /api/order/create"""

    def test_order_success(self, customer_client, product_p, django_capture_on_commit_callbacks):
        """Stock and sales move by the ordered quantity and a summary is mailed."""
        url = reverse('orders:create')

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(
                url, [{'productId': product_p.id, 'quantity': 3}], format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'order.success'}

        product_p.refresh_from_db()
        assert product_p.stock_quantity == 7
        assert product_p.sales == 3

        assert len(mail.outbox) == 1
        email = mail.outbox[0]
        assert email.to == ['alice@example.com']
        assert email.subject == 'Order summary'
        assert 'P x 3 = 60.0 zł' in email.body
        assert 'Total: 60.0 zł' in email.body

    def test_order_multiple_products(self, customer_client, product_p, product_a,
                                     django_capture_on_commit_callbacks):
        url = reverse('orders:create')
        data = [
            {'productId': product_p.id, 'quantity': 1},
            {'productId': product_a.id, 'quantity': 2},
        ]

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK

        product_p.refresh_from_db()
        product_a.refresh_from_db()
        assert (product_p.stock_quantity, product_p.sales) == (9, 1)
        assert (product_a.stock_quantity, product_a.sales) == (3, 2)
        assert 'Total: 51.0 zł' in mail.outbox[0].body

    def test_insufficient_stock_changes_nothing(self, customer_client, product_a, product_b,
                                                django_capture_on_commit_callbacks):
        """One short line item rejects the whole order."""
        url = reverse('orders:create')
        data = [
            {'productId': product_a.id, 'quantity': 2},
            {'productId': product_b.id, 'quantity': 1},
        ]

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'insufficient_stock'
        assert response.data['message'] == 'order.notEnoughStock'
        assert response.data['context'] == {'productName': 'B'}

        product_a.refresh_from_db()
        product_b.refresh_from_db()
        assert (product_a.stock_quantity, product_a.sales) == (5, 0)
        assert (product_b.stock_quantity, product_b.sales) == (0, 4)
        assert mail.outbox == []

    def test_missing_product_changes_nothing(self, customer_client, product_p,
                                             django_capture_on_commit_callbacks):
        url = reverse('orders:create')
        data = [
            {'productId': product_p.id, 'quantity': 2},
            {'productId': 9999, 'quantity': 1},
        ]

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['kind'] == 'product_not_found'
        assert response.data['message'] == 'order.productNotFound'
        assert response.data['context'] == {'productId': 9999}

        product_p.refresh_from_db()
        assert (product_p.stock_quantity, product_p.sales) == (10, 0)
        assert mail.outbox == []

    def test_repeated_product_is_summed(self, customer_client, product_p):
        """Two lines of six exceed a stock of ten."""
        url = reverse('orders:create')
        data = [
            {'productId': product_p.id, 'quantity': 6},
            {'productId': product_p.id, 'quantity': 6},
        ]
        response = customer_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        product_p.refresh_from_db()
        assert product_p.stock_quantity == 10

    def test_exact_stock_can_be_ordered(self, customer_client, product_a):
        url = reverse('orders:create')
        response = customer_client.post(url, [{'productId': product_a.id, 'quantity': 5}], format='json')

        assert response.status_code == status.HTTP_200_OK
        product_a.refresh_from_db()
        assert product_a.stock_quantity == 0

    def test_empty_order_accepted(self, customer_client, django_capture_on_commit_callbacks):
        url = reverse('orders:create')

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(url, [], format='json')

        assert response.status_code == status.HTTP_200_OK
        assert len(mail.outbox) == 1
        assert 'Total: 0.0 zł' in mail.outbox[0].body

    def test_zero_quantity_rejected(self, customer_client, product_p):
        url = reverse('orders:create')
        response = customer_client.post(url, [{'productId': product_p.id, 'quantity': 0}], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['kind'] == 'validation_error'

    def test_body_must_be_a_list(self, customer_client, product_p):
        url = reverse('orders:create')
        response = customer_client.post(url, {'productId': product_p.id, 'quantity': 1}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_email_failure_keeps_order(self, customer_client, product_p,
                                       django_capture_on_commit_callbacks, settings):
        settings.EMAIL_BACKEND = 'apps.orders.tests.test_api.BrokenEmailBackend'
        url = reverse('orders:create')

        with django_capture_on_commit_callbacks(execute=True):
            response = customer_client.post(
                url, [{'productId': product_p.id, 'quantity': 1}], format='json'
            )

        assert response.status_code == status.HTTP_200_OK
        product_p.refresh_from_db()
        assert product_p.stock_quantity == 9


class BrokenEmailBackend:
    """Email backend whose SMTP server is always down."""

    def __init__(self, *args, **kwargs):
        pass

    def send_messages(self, messages):
        raise ConnectionRefusedError('SMTP unavailable')
