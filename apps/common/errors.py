"""
Shared error result type for the shop API.

Every domain exception raised by the services layer derives from
``ShopError`` and carries three things:

    kind     machine-readable discriminator (``insufficient_stock``)
    message  message code the frontend translates (``order.notEnoughStock``)
    context  extra key/value data (``{'productName': 'Kenya AA'}``)

``shop_exception_handler`` is installed as DRF's EXCEPTION_HANDLER and
renders both ``ShopError`` and DRF's own exceptions into the same
``{kind, message, context}`` body, so clients never see ad hoc payloads.

Usage:
    from apps.orders.services.exceptions import InsufficientStockError

    raise InsufficientStockError(productName=product.name)
"""

from rest_framework import exceptions, status
from rest_framework.response import Response


class ShopError(Exception):
    """
    Base exception for all shop service errors.

    Subclasses set ``kind``, ``status_code`` and ``default_message``; the
    message can be overridden per raise and any keyword arguments become
    the error context.
    """

    kind = 'error'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'error'

    def __init__(self, message=None, **context):
        self.message = message or self.default_message
        self.context = context
        super().__init__(self.message)

    def as_payload(self) -> dict:
        return {
            'kind': self.kind,
            'message': self.message,
            'context': self.context,
        }


def error_response(exc: ShopError) -> Response:
    """Render a ShopError as a DRF response."""
    return Response(exc.as_payload(), status=exc.status_code)


def shop_exception_handler(exc, context):
    """DRF exception handler producing the fixed error shape."""
    if isinstance(exc, ShopError):
        return error_response(exc)

    # rest_framework.views loads the authentication classes, which import this module
    from rest_framework.views import exception_handler

    response = exception_handler(exc, context)
    if response is None:
        # Unexpected fault, let Django's 500 handler take it
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            'kind': 'validation_error',
            'message': 'request.invalid',
            'context': {'errors': response.data},
        }
    elif response.status_code == status.HTTP_401_UNAUTHORIZED:
        response.data = {
            'kind': 'unauthorized',
            'message': 'auth.unauthorized',
            'context': {},
        }
    else:
        detail = response.data.get('detail', '') if isinstance(response.data, dict) else ''
        response.data = {
            'kind': getattr(detail, 'code', None) or 'error',
            'message': str(detail),
            'context': {},
        }

    return response
