"""Services for order placement."""

from .exceptions import (
    OrdersServiceError,
    InsufficientStockError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from .notifications import send_order_summary
from .order_placement import (
    validate_order_items,
    commit_order,
    build_order_summary,
    order_total,
    notify_order_placed,
    place_order,
)

__all__ = [
    # Exceptions
    'OrdersServiceError',
    'InsufficientStockError',
    'InvalidQuantityError',
    'ProductNotFoundError',
    # Services
    'send_order_summary',
    'validate_order_items',
    'commit_order',
    'build_order_summary',
    'order_total',
    'notify_order_placed',
    'place_order',
]
