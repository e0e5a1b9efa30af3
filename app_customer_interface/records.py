# app_customer_interface/records.py
"""
Typed views of store rows.

Rows coming back from :mod:`app_customer_interface.data_store` are plain
dictionaries; before the cart or the checkout touches them they are turned
into the records below, which check that the required columns are present
and coerce prices and quantities.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from django.core.files.storage import default_storage


class RecordError(ValueError):
    pass


def _require(kind, row, *names):
    missing = [name for name in names if row.get(name) in (None, '')]
    if missing:
        raise RecordError(f"{kind} row is missing required field(s): {', '.join(missing)}")


def _decimal(kind, name, value):
    if value is None:
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise RecordError(f"{kind} field '{name}' is not a decimal: {value!r}")


def _int(kind, name, value):
    if value is None or value == '':
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise RecordError(f"{kind} field '{name}' is not an integer: {value!r}")


@dataclass(frozen=True)
class RestaurantRecord:
    id: str
    name: str
    location: str = ''
    owner_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        _require('Restaurant', row, 'id', 'name')
        return cls(
            id=str(row['id']),
            name=row['name'],
            location=row.get('location') or '',
            owner_id=row.get('owner_id'),
            created_at=row.get('created_at'),
        )


@dataclass(frozen=True)
class DishRecord:
    id: str
    name: str
    price: Decimal
    restaurant_id: Optional[str] = None
    description: str = ''
    image_url: Optional[str] = None
    model_url: Optional[str] = None
    ingredients: Optional[str] = None
    calories: Optional[int] = None
    protein: Optional[Decimal] = None
    availability: bool = True
    preparation_time_minutes: int = 15

    @classmethod
    def from_row(cls, row):
        _require('Dish', row, 'id', 'name', 'price')
        model_url = row.get('model_url') or None
        if row.get('model_file'):
            model_url = default_storage.url(row['model_file'])
        restaurant_id = row.get('restaurant_id')
        prep_time = _int('Dish', 'preparation_time_minutes', row.get('preparation_time_minutes'))
        return cls(
            id=str(row['id']),
            name=row['name'],
            price=_decimal('Dish', 'price', row['price']),
            restaurant_id=str(restaurant_id) if restaurant_id is not None else None,
            description=row.get('description') or '',
            image_url=row.get('image_url') or None,
            model_url=model_url,
            ingredients=row.get('ingredients') or None,
            calories=_int('Dish', 'calories', row.get('calories')),
            protein=_decimal('Dish', 'protein', row.get('protein')),
            availability=bool(row.get('availability', True)),
            preparation_time_minutes=15 if prep_time is None else prep_time,
        )

    def snapshot(self):
        """JSON-safe copy kept in the customer's session."""
        return {
            'id': self.id,
            'name': self.name,
            'price': str(self.price),
            'restaurant_id': self.restaurant_id,
            'image_url': self.image_url,
            'model_url': self.model_url,
            'preparation_time_minutes': self.preparation_time_minutes,
        }


@dataclass(frozen=True)
class OrderRecord:
    id: str
    restaurant_id: str
    quantity: int
    table_number: int
    status: str
    dish_id: Optional[str] = None
    customer_notes: str = ''
    created_at: Optional[datetime] = None
    extra: dict = field(default_factory=dict, compare=False)

    @classmethod
    def from_row(cls, row):
        _require('Order', row, 'id', 'restaurant_id', 'quantity', 'table_number', 'status')
        dish_id = row.get('dish_id')
        known = {'id', 'restaurant_id', 'dish_id', 'quantity', 'table_number',
                 'status', 'customer_notes', 'created_at'}
        return cls(
            id=str(row['id']),
            restaurant_id=str(row['restaurant_id']),
            dish_id=str(dish_id) if dish_id is not None else None,
            quantity=_int('Order', 'quantity', row['quantity']),
            table_number=_int('Order', 'table_number', row['table_number']),
            status=row['status'],
            customer_notes=row.get('customer_notes') or '',
            created_at=row.get('created_at'),
            extra={k: v for k, v in row.items() if k not in known},
        )

    @property
    def short_id(self):
        return self.id[:8]


@dataclass(frozen=True)
class ProfileRecord:
    id: str
    user_id: int
    full_name: str = ''
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row):
        _require('Profile', row, 'id', 'user_id')
        return cls(
            id=str(row['id']),
            user_id=row['user_id'],
            full_name=row.get('full_name') or '',
            created_at=row.get('created_at'),
        )
