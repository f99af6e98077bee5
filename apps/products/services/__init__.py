"""Services for products business logic."""

from .exceptions import ProductsServiceError, ProductNotFoundError
from .product_management import (
    get_product,
    create_product,
    update_product,
    delete_product,
)
from .product_search import (
    list_products,
    search_products,
    get_top_selling_products,
    TOP_SELLERS_LIMIT,
)

__all__ = [
    # Exceptions
    'ProductsServiceError',
    'ProductNotFoundError',
    # Management
    'get_product',
    'create_product',
    'update_product',
    'delete_product',
    # Search
    'list_products',
    'search_products',
    'get_top_selling_products',
    'TOP_SELLERS_LIMIT',
]
