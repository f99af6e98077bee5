"""Product CRUD operations service."""

import logging

from django.db import transaction
from decimal import Decimal
from typing import Any

from ..models import Product
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


def get_product(*, product_id: int) -> Product:
    """
    Fetch a product by id.

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    try:
        return Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(productId=product_id)


@transaction.atomic
def create_product(
    *,
    name: str,
    price: Decimal,
    description: str = '',
    stock_quantity: int = 0,
    product_available: bool = True,
    roast_level: int = 0,
    caffeine_level: int = 0,
    sweetness: int = 0,
    acidity: int = 0,
    weight: str = ''
) -> Product:
    """
    Add a coffee to the catalog.

    New products always start with zero sales.

    Returns:
        Created Product instance
    """
    product = Product.objects.create(
        name=name,
        price=price,
        description=description,
        stock_quantity=stock_quantity,
        product_available=product_available,
        roast_level=roast_level,
        caffeine_level=caffeine_level,
        sweetness=sweetness,
        acidity=acidity,
        weight=weight,
    )

    logger.info("Created product %s (%s)", product.id, product.name)
    return product


@transaction.atomic
def update_product(*, product_id: int, **fields: Any) -> Product:
    """
    Update catalog fields of a product.

    Args:
        product_id: Product to update
        **fields: Model fields to overwrite

    Returns:
        Updated Product instance

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    try:
        product = Product.objects.select_for_update().get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(productId=product_id)

    for field, value in fields.items():
        setattr(product, field, value)

    if fields:
        product.save(update_fields=list(fields))

    return product


@transaction.atomic
def delete_product(*, product_id: int) -> None:
    """
    Remove a product from the catalog.

    Raises:
        ProductNotFoundError: If the product doesn't exist
    """
    deleted, _ = Product.objects.filter(id=product_id).delete()
    if not deleted:
        raise ProductNotFoundError(productId=product_id)

    logger.info("Deleted product %s", product_id)
