from decimal import Decimal

import pytest

from app_customer_interface.records import (
    DishRecord,
    OrderRecord,
    ProfileRecord,
    RecordError,
    RestaurantRecord,
)


def test_restaurant_requires_name():
    with pytest.raises(RecordError, match='name'):
        RestaurantRecord.from_row({'id': 'r1', 'name': ''})


def test_dish_coerces_price_and_defaults():
    dish = DishRecord.from_row({'id': 'd1', 'name': 'Soup', 'price': 7.5, 'calories': '120'})

    assert dish.price == Decimal('7.5')
    assert dish.calories == 120
    assert dish.preparation_time_minutes == 15
    assert dish.availability is True


def test_dish_with_bad_price():
    with pytest.raises(RecordError, match='price'):
        DishRecord.from_row({'id': 'd1', 'name': 'Soup', 'price': 'cheap'})


def test_dish_prefers_uploaded_model(settings):
    settings.MEDIA_URL = '/media/'
    dish = DishRecord.from_row({
        'id': 'd1', 'name': 'Soup', 'price': '7.00',
        'model_url': 'https://cdn.example.com/soup.glb',
        'model_file': 'dish-assets/r1/d1.glb',
    })

    assert dish.model_url == '/media/dish-assets/r1/d1.glb'


def test_dish_snapshot_is_json_safe():
    dish = DishRecord.from_row({'id': 'd1', 'name': 'Soup', 'price': Decimal('7.00'), 'restaurant_id': 'r1'})

    snapshot = dish.snapshot()

    assert snapshot['price'] == '7.00'
    assert DishRecord.from_row(snapshot) == dish


def test_order_keeps_joined_columns_aside():
    order = OrderRecord.from_row({
        'id': 'abcdef0123', 'restaurant_id': 'r1', 'dish_id': None, 'quantity': '2',
        'table_number': 9, 'status': 'pending', 'dish__name': 'Soup',
    })

    assert order.quantity == 2
    assert order.dish_id is None
    assert order.short_id == 'abcdef01'
    assert order.extra == {'dish__name': 'Soup'}


def test_order_requires_status():
    with pytest.raises(RecordError, match='status'):
        OrderRecord.from_row({'id': 'o1', 'restaurant_id': 'r1', 'quantity': 1, 'table_number': 1})


def test_profile():
    profile = ProfileRecord.from_row({'id': 'p1', 'user_id': 3, 'full_name': None})
    assert profile.full_name == ''
