# app_customer_interface/cart.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterator, List

from .records import DishRecord

SESSION_KEY_PREFIX = 'cart_'


@dataclass
class CartLine:
    dish: DishRecord
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.dish.price * self.quantity


class Cart:
    """
    A customer's in-progress selection for one restaurant's menu.

    Lines are keyed by dish id and keep the order in which dishes were first
    added. Every operation is total: unknown dish ids are ignored.
    """

    def __init__(self, restaurant_id):
        self.restaurant_id = str(restaurant_id)
        self._lines: Dict[str, CartLine] = {}

    def add(self, dish: DishRecord) -> CartLine:
        line = self._lines.get(dish.id)
        if line is None:
            line = CartLine(dish=dish, quantity=1)
            self._lines[dish.id] = line
        else:
            line.quantity += 1
        return line

    def remove(self, dish_id) -> None:
        dish_id = str(dish_id)
        line = self._lines.get(dish_id)
        if line is None:
            return
        if line.quantity > 1:
            line.quantity -= 1
        else:
            del self._lines[dish_id]

    def total_price(self) -> Decimal:
        return sum((line.line_total for line in self._lines.values()), Decimal('0'))

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def quantity_of(self, dish_id) -> int:
        line = self._lines.get(str(dish_id))
        return line.quantity if line else 0

    def clear(self) -> None:
        self._lines.clear()

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def __iter__(self) -> Iterator[CartLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, dish_id) -> bool:
        return str(dish_id) in self._lines

    # session persistence

    @staticmethod
    def session_key(restaurant_id) -> str:
        return f"{SESSION_KEY_PREFIX}{restaurant_id}"

    def to_dict(self) -> dict:
        return {
            'restaurant_id': self.restaurant_id,
            'lines': [
                {'dish': line.dish.snapshot(), 'quantity': line.quantity}
                for line in self._lines.values()
            ],
        }

    @classmethod
    def from_dict(cls, restaurant_id, data) -> 'Cart':
        cart = cls(restaurant_id)
        for item in (data or {}).get('lines', []):
            try:
                dish = DishRecord.from_row(item['dish'])
                quantity = int(item['quantity'])
            except (KeyError, TypeError, ValueError):
                continue
            if quantity > 0:
                cart._lines[dish.id] = CartLine(dish=dish, quantity=quantity)
        return cart

    @classmethod
    def from_session(cls, session, restaurant_id) -> 'Cart':
        return cls.from_dict(restaurant_id, session.get(cls.session_key(restaurant_id)))

    def save(self, session) -> None:
        session[self.session_key(self.restaurant_id)] = self.to_dict()

    def discard(self, session) -> None:
        session.pop(self.session_key(self.restaurant_id), None)
