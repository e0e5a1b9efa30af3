from decimal import Decimal

import pytest
from django.contrib.auth.models import Group, User
from django.core.cache import cache

from app_customer_interface.records import DishRecord
from app_owner_admin_panel.models import Dish, Restaurant


@pytest.fixture(autouse=True)
def isolated_media(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / 'media'
    settings.QR_CODE_DIR = tmp_path / 'qr'
    settings.PUBLIC_BASE_URL = ''


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def owner(db):
    user = User.objects.create_user(username='owner', password='s3cret-Passw0rd', email='owner@example.com')
    user.profile.full_name = 'Olive Owner'
    user.profile.save()
    return user


@pytest.fixture
def restaurant(owner):
    return Restaurant.objects.create(name='Harbor Grill', location='Pier 4', owner=owner)


@pytest.fixture
def burger(restaurant):
    return Dish.objects.create(restaurant=restaurant, name='Burger', price=Decimal('15.99'))


@pytest.fixture
def pizza(restaurant):
    return Dish.objects.create(
        restaurant=restaurant, name='Pizza', price=Decimal('18.50'), preparation_time_minutes=20,
    )


@pytest.fixture
def platform_admin(db):
    user = User.objects.create_user(username='admin', password='s3cret-Passw0rd')
    group, _ = Group.objects.get_or_create(name='Platform Admin')
    user.groups.add(group)
    return user


def dish_record(dish):
    return DishRecord(
        id=str(dish.id),
        name=dish.name,
        price=Decimal(dish.price),
        restaurant_id=str(dish.restaurant_id),
        preparation_time_minutes=dish.preparation_time_minutes,
    )
