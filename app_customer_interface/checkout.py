# app_customer_interface/checkout.py
"""
Turning a cart into order rows.

One ``orders`` row is inserted per cart line, one after the other, in the
order the lines were added. There is no surrounding transaction: when an
insert fails, the rows written before it stay committed, the remaining
lines are skipped and the cart is left as it was so the customer can retry.
The id of the first inserted row is reported as the order id.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from django.core.cache import cache

from .data_store import StoreError
from .models import Order

logger = logging.getLogger(__name__)

MISSING_INFORMATION = "Please enter table number and add items to cart"
INVALID_TABLE_NUMBER = "Table number must be a number"
ORDER_FAILED = "Failed to place order. Please try again."
ORDER_IN_PROGRESS = "Your order is already being placed."

# Upper bound of the orders.table_number column (PositiveIntegerField)
MAX_TABLE_NUMBER = 2147483647


class CheckoutValidationError(Exception):
    pass


class CheckoutError(Exception):

    def __init__(self, message, committed_order_ids=None):
        super().__init__(message)
        self.committed_order_ids = list(committed_order_ids or [])


class CheckoutInProgress(Exception):
    pass


@dataclass
class CheckoutResult:
    order_id: str
    order_ids: List[str] = field(default_factory=list)
    total_price: Decimal = Decimal('0')
    total_items: int = 0

    @property
    def short_id(self):
        return self.order_id[:8]


def parse_table_number(raw):
    value = (raw or '').strip() if isinstance(raw, str) else raw
    if value in (None, ''):
        raise CheckoutValidationError(MISSING_INFORMATION)
    if not isinstance(value, int):
        if not (value.isascii() and value.isdigit()):
            raise CheckoutValidationError(INVALID_TABLE_NUMBER)
        value = int(value)
    if not 0 <= value <= MAX_TABLE_NUMBER:
        raise CheckoutValidationError(INVALID_TABLE_NUMBER)
    return value


class CheckoutSubmitter:

    def __init__(self, store, restaurant_id):
        self.store = store
        self.restaurant_id = str(restaurant_id)

    def validate(self, cart, table_number):
        if cart.is_empty:
            raise CheckoutValidationError(MISSING_INFORMATION)
        return parse_table_number(table_number)

    def submit(self, cart, table_number, customer_notes=''):
        """
        Write one pending order row per cart line.

        Raises :class:`CheckoutValidationError` before any write when the
        table number or the cart is unusable, and :class:`CheckoutError`
        when an insert fails part-way. On success the cart is emptied.
        """
        table = self.validate(cart, table_number)
        notes = customer_notes or ''
        total_price = cart.total_price()
        total_items = cart.total_items()

        order_ids = []
        for line in cart.lines:
            row = {
                'restaurant_id': self.restaurant_id,
                'dish_id': line.dish.id,
                'quantity': line.quantity,
                'table_number': table,
                'customer_notes': notes,
                'status': Order.STATUS_PENDING,
            }
            try:
                inserted = self.store.insert('orders', row)
            except StoreError as e:
                logger.error(
                    "Order placement for restaurant %s stopped after %d of %d line(s): %s",
                    self.restaurant_id, len(order_ids), len(cart), e,
                )
                raise CheckoutError(ORDER_FAILED, committed_order_ids=order_ids) from e
            order_ids.append(str(inserted['id']))

        cart.clear()
        logger.info(
            "Placed order %s for restaurant %s, table %s: %d line(s), total %s",
            order_ids[0], self.restaurant_id, table, len(order_ids), total_price,
        )
        return CheckoutResult(
            order_id=order_ids[0],
            order_ids=order_ids,
            total_price=total_price,
            total_items=total_items,
        )


@contextmanager
def submission_guard(session_key):
    """Refuse a second checkout from the same browsing session while one is running."""
    cache_key = f"checkout-in-flight:{session_key}"
    if not cache.add(cache_key, True, timeout=None):
        raise CheckoutInProgress(ORDER_IN_PROGRESS)
    try:
        yield
    finally:
        cache.delete(cache_key)
