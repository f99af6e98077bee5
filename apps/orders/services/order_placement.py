"""
Order Placement Service
=======================

Turns a basket of ``{product_id, quantity}`` line items into stock
movements and an emailed order summary.

Placement runs in three phases:

    1. Validation - every product must exist and have enough stock for
       the total quantity ordered. Nothing is written.
    2. Commit - one transaction decrements ``stock_quantity`` and
       increments ``sales`` per product with a conditional UPDATE, so
       stock can never go negative even when orders race.
    3. Notification - once the transaction commits, the summary is
       mailed to the customer. Mail failures are logged only.

Example:
    Placing an order for a logged-in user::

        from apps.orders.services import place_order

        receipt = place_order(
            user=request.user,
            items=[{'product_id': 1, 'quantity': 3}],
        )
        print(receipt['summary'])
        # Your order:
        #
        # Kenya AA x 3 = 60.0 zł
        #
        # Total: 60.0 zł
"""

import logging
from decimal import Decimal
from functools import partial

from django.db import transaction
from django.db.models import F

from apps.accounts.models import User
from apps.products.models import Product
from .exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ProductNotFoundError,
)
from .notifications import send_order_summary

logger = logging.getLogger(__name__)

CURRENCY = 'zł'


def _requested_quantities(lines) -> dict:
    """Total quantity per product id, in first-seen order."""
    quantities = {}
    for line in lines:
        quantities[line['product_id']] = quantities.get(line['product_id'], 0) + line['quantity']
    return quantities


def validate_order_items(items) -> list[dict]:
    """
    Check a basket against current stock without changing anything.

    Line items are checked in order and the first failure wins. When the
    same product appears more than once, its quantities are added up
    before comparing with stock.

    Args:
        items: Sequence of dicts with ``product_id`` and ``quantity``

    Returns:
        list[dict]: One priced line per item with keys ``product_id``,
        ``name``, ``quantity``, ``unit_price`` and ``line_total``.

    Raises:
        InvalidQuantityError: If a quantity is below 1
        ProductNotFoundError: If a product id does not exist
        InsufficientStockError: If stock cannot cover the ordered quantity
    """
    products = {}
    requested = {}
    lines = []

    for item in items:
        product_id = item['product_id']
        quantity = item['quantity']

        if quantity < 1:
            raise InvalidQuantityError(productId=product_id, quantity=quantity)

        if product_id not in products:
            try:
                products[product_id] = Product.objects.get(id=product_id)
            except Product.DoesNotExist:
                raise ProductNotFoundError('order.productNotFound', productId=product_id)

        product = products[product_id]
        requested[product_id] = requested.get(product_id, 0) + quantity

        if product.stock_quantity < requested[product_id]:
            raise InsufficientStockError(productName=product.name)

        lines.append({
            'product_id': product_id,
            'name': product.name,
            'quantity': quantity,
            'unit_price': product.price,
            'line_total': product.price * quantity,
        })

    return lines


@transaction.atomic
def commit_order(lines) -> None:
    """
    Apply validated lines to the catalog in a single transaction.

    Each product is updated with::

        UPDATE products
           SET stock_quantity = stock_quantity - q, sales = sales + q
         WHERE id = ? AND stock_quantity >= q

    If stock moved since validation and an update matches no row, the
    error is raised inside the transaction and every earlier update of
    this order is rolled back. Products are updated in id order so two
    orders sharing products take their row locks in the same order.

    Raises:
        ProductNotFoundError: If a product was deleted after validation
        InsufficientStockError: If stock dropped below the ordered quantity
    """
    quantities = _requested_quantities(lines)

    for product_id in sorted(quantities):
        quantity = quantities[product_id]

        updated = (
            Product.objects
            .filter(id=product_id, stock_quantity__gte=quantity)
            .update(
                stock_quantity=F('stock_quantity') - quantity,
                sales=F('sales') + quantity,
            )
        )

        if not updated:
            product = Product.objects.filter(id=product_id).first()
            if product is None:
                raise ProductNotFoundError('order.productNotFound', productId=product_id)
            raise InsufficientStockError(productName=product.name)


def order_total(lines) -> Decimal:
    """Sum of the line totals, zero for an empty basket."""
    return sum((line['line_total'] for line in lines), Decimal('0'))


def build_order_summary(lines) -> str:
    """
    Render the plain-text summary mailed to the customer.

    Amounts are printed as floats (``60.0``), matching the summaries the
    shop has always sent.
    """
    rows = [
        f"{line['name']} x {line['quantity']} = {float(line['line_total'])} {CURRENCY}"
        for line in lines
    ]

    body = "Your order:\n\n"
    body += "".join(f"{row}\n" for row in rows)
    body += f"\nTotal: {float(order_total(lines))} {CURRENCY}"
    return body


def notify_order_placed(*, user: User, summary: str):
    """Hand the summary to the notification sender."""
    return send_order_summary(recipient=user.email, summary=summary)


def place_order(*, user: User, items) -> dict:
    """
    Validate, commit and announce an order.

    An empty basket is accepted: nothing is committed and the customer
    receives a summary with a zero total.

    Args:
        user: Logged-in customer placing the order
        items: Sequence of dicts with ``product_id`` and ``quantity``

    Returns:
        dict: Receipt with ``lines`` (see validate_order_items),
        ``total`` (Decimal) and ``summary`` (str).

    Raises:
        InvalidQuantityError: If a quantity is below 1
        ProductNotFoundError: If a product id does not exist
        InsufficientStockError: If stock cannot cover the order
    """
    try:
        lines = validate_order_items(items)
    except (ProductNotFoundError, InsufficientStockError) as e:
        logger.info("Order by %s rejected: %s %s", user.username, e.kind, e.context)
        raise

    summary = build_order_summary(lines)

    with transaction.atomic():
        commit_order(lines)
        transaction.on_commit(partial(notify_order_placed, user=user, summary=summary))

    total = order_total(lines)
    logger.info(
        "Order by %s committed: %d line(s), total %s",
        user.username, len(lines), total
    )

    return {
        'lines': lines,
        'total': total,
        'summary': summary,
    }
