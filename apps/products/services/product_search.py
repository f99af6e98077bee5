"""Product search and ranking service."""

from django.db.models import QuerySet

from ..models import Product

TOP_SELLERS_LIMIT = 10


def list_products() -> QuerySet:
    """Return the whole catalog in id order."""
    return Product.objects.all()


def search_products(*, keyword: str) -> QuerySet:
    """
    Case-insensitive substring search on product names.

    An empty keyword matches every product.
    """
    return Product.objects.filter(name__icontains=keyword or '')


def get_top_selling_products(*, limit: int = TOP_SELLERS_LIMIT) -> list[Product]:
    """Return the ``limit`` products with the highest sales counters."""
    return list(Product.objects.order_by('-sales', 'id')[:limit])
