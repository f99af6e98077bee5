"""
Domain exceptions for orders app.

Exception Hierarchy:
    OrdersServiceError (base)
    ├── InsufficientStockError
    └── InvalidQuantityError

Missing products are reported with the catalog's ProductNotFoundError,
re-exported here so callers can import every order failure from one place.
"""

from rest_framework import status

from apps.common.errors import ShopError
from apps.products.services.exceptions import ProductNotFoundError


class OrdersServiceError(ShopError):
    """Base exception for all orders service errors."""
    pass


class InsufficientStockError(OrdersServiceError):
    """
    Raised when a product has fewer units in stock than ordered.

    Example:
        raise InsufficientStockError(productName='Kenya AA')
    """
    kind = 'insufficient_stock'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'order.notEnoughStock'


class InvalidQuantityError(OrdersServiceError):
    """Raised when a line item asks for less than one unit."""
    kind = 'invalid_quantity'
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'order.invalidQuantity'


__all__ = [
    'OrdersServiceError',
    'InsufficientStockError',
    'InvalidQuantityError',
    'ProductNotFoundError',
]
