from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.http import HttpResponse
from django.test import RequestFactory
from django.urls import reverse
from django.utils import timezone

from app_customer_interface.data_store import DataStore
from app_customer_interface.models import Order
from app_owner_admin_panel.decorators import allowed_user
from app_owner_admin_panel.models import Dish, Restaurant
from app_platform_admin.stats import (
    platform_stats,
    recent_orders,
    restaurants_overview,
    search,
    total_revenue,
    users_overview,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def orders(restaurant, burger, pizza):
    return [
        Order.objects.create(restaurant=restaurant, dish=burger, quantity=2, table_number=1),
        Order.objects.create(restaurant=restaurant, dish=pizza, quantity=1, table_number=1),
    ]


def test_revenue_sums_price_times_quantity(store, orders):
    assert total_revenue(store) == Decimal('50.48')


def test_revenue_skips_removed_dishes(store, orders, pizza):
    pizza.delete()

    assert total_revenue(store) == Decimal('31.98')


def test_platform_stats(store, orders, restaurant):
    old = timezone.now() - timedelta(days=30)
    Restaurant.objects.filter(pk=restaurant.pk).update(created_at=old)
    Order.objects.filter(pk=orders[1].pk).update(created_at=old)

    stats = platform_stats(store)

    assert stats.total_restaurants == 1
    assert stats.total_users == 1
    assert stats.total_orders == 2
    assert stats.orders_today == 1
    assert stats.new_restaurants_this_week == 0


def test_restaurants_overview(store, orders, restaurant):
    [row] = restaurants_overview(store)

    assert row['name'] == 'Harbor Grill'
    assert row['owner_name'] == 'Olive Owner'
    assert row['dishes_count'] == 2
    assert row['orders_count'] == 2


def test_users_overview_counts_restaurants(store, owner, restaurant):
    Restaurant.objects.create(name='Second Spot', owner=owner)
    User.objects.create_user(username='idle', password='x')

    users = {u['user_id']: u for u in users_overview(store)}

    assert users[owner.id]['restaurants_count'] == 2
    assert len(users) == 2


def test_users_overview_limit(store, db):
    for i in range(3):
        User.objects.create_user(username=f'user{i}', password='x')

    assert len(users_overview(store, limit=2)) == 2


def test_recent_orders(store, orders, pizza):
    pizza.delete()

    rows = recent_orders(store)

    assert len(rows) == 2
    assert {r['dish_name'] for r in rows} == {'Burger', 'Removed dish'}
    assert all(r['restaurant_name'] == 'Harbor Grill' for r in rows)


def test_search_matches_name_location_and_user():
    restaurants = [{'name': 'Harbor Grill', 'location': 'Pier 4'}, {'name': 'Alpine Hut', 'location': 'Ridge'}]
    users = [{'full_name': 'Olive Owner'}, {'full_name': None}]

    assert search(restaurants, users, 'pier') == ([restaurants[0]], [])
    assert search(restaurants, users, ' OLIVE ') == ([], [users[0]])
    assert search(restaurants, users, '') == (restaurants, users)


def test_admin_panel_for_platform_admin(client, platform_admin, orders):
    client.force_login(platform_admin)

    response = client.get(reverse('platform_admin'))

    assert response.status_code == 200
    assert response.context['stats'].total_orders == 2
    assert len(response.context['recent_orders']) == 2


def test_admin_panel_search(client, platform_admin, restaurant):
    client.force_login(platform_admin)

    response = client.get(reverse('platform_admin'), {'q': 'nothing-like-this'})

    assert response.context['restaurants'] == []


def test_admin_panel_denies_owners(client, owner):
    client.force_login(owner)

    response = client.get(reverse('platform_admin'))

    assert response.status_code == 403
    assert b'Access Denied' in response.content


def test_platform_admin_lands_on_admin_panel(client, platform_admin):
    response = client.post(reverse('login'), {'username': 'admin', 'password': 's3cret-Passw0rd'})

    assert response.url == reverse('platform_admin')


def test_overviews_use_one_query_each(store, owner, orders, django_assert_num_queries):
    for i in range(3):
        other = User.objects.create_user(username=f'owner{i}', password='x')
        spot = Restaurant.objects.create(name=f'Spot {i}', owner=other)
        Dish.objects.create(restaurant=spot, name='Soup', price='5.00')

    with django_assert_num_queries(1):
        restaurants = restaurants_overview(store)
    with django_assert_num_queries(1):
        users = users_overview(store)

    assert len(restaurants) == 4
    assert {r['dishes_count'] for r in restaurants} == {1, 2}
    assert len(users) == 4


def test_restaurant_without_owner_name(store, restaurant, owner):
    owner.profile.full_name = ''
    owner.profile.save()

    [row] = restaurants_overview(store)

    assert row['owner_name'] == 'Unknown'


def test_role_gate_without_roles_only_admits_superusers(owner):
    view = allowed_user()(lambda request: HttpResponse('ok'))
    request = RequestFactory().get('/')
    request.user = owner

    assert view(request).status_code == 403

    owner.is_superuser = True
    assert view(request).status_code == 200
