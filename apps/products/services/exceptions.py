"""Domain exceptions for products services."""

from rest_framework import status

from apps.common.errors import ShopError


class ProductsServiceError(ShopError):
    """Base exception for products services."""
    pass


class ProductNotFoundError(ProductsServiceError):
    """Product does not exist."""
    kind = 'product_not_found'
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'product.notFound'
