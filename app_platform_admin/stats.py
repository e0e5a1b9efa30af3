# app_platform_admin/stats.py
"""
Platform-wide figures for the admin panel, computed from store counts and
plain Python sums over the returned rows.
"""
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal

from django.db.models import Count
from django.utils import timezone


@dataclass
class AdminStats:
    total_restaurants: int = 0
    total_users: int = 0
    total_orders: int = 0
    total_revenue: Decimal = Decimal('0')
    orders_today: int = 0
    new_restaurants_this_week: int = 0


def total_revenue(store):
    rows = store.select('orders', columns=('quantity', 'dish__price'))
    revenue = Decimal('0')
    for row in rows:
        price = row.get('dish__price')
        if price is None:
            continue
        revenue += Decimal(str(price)) * row['quantity']
    return revenue


def platform_stats(store, now=None):
    now = now or timezone.now()
    start_of_today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    week_ago = now - timedelta(days=7)

    return AdminStats(
        total_restaurants=store.count('restaurants'),
        total_users=store.count('profiles'),
        total_orders=store.count('orders'),
        total_revenue=total_revenue(store),
        orders_today=store.count('orders', {'created_at__gte': start_of_today}),
        new_restaurants_this_week=store.count('restaurants', {'created_at__gte': week_ago}),
    )


def restaurants_overview(store):
    rows = store.select(
        'restaurants',
        order_by='-created_at',
        columns=('id', 'name', 'location', 'owner_id', 'created_at', 'owner__profile__full_name'),
        annotate={
            'dishes_count': Count('dishes', distinct=True),
            'orders_count': Count('orders', distinct=True),
        },
    )
    for row in rows:
        row['owner_name'] = row.pop('owner__profile__full_name') or 'Unknown'
    return rows


def users_overview(store, limit=50):
    return store.select(
        'profiles',
        order_by='-created_at',
        limit=limit,
        columns=('id', 'user_id', 'full_name', 'created_at'),
        annotate={'restaurants_count': Count('user__restaurants')},
    )


def recent_orders(store, limit=20):
    rows = store.select(
        'orders',
        order_by='-created_at',
        limit=limit,
        columns=('id', 'created_at', 'status', 'table_number', 'quantity',
                 'restaurant__name', 'dish__name', 'dish__price'),
    )
    return [
        {
            'id': row['id'],
            'created_at': row['created_at'],
            'status': row['status'],
            'table_number': row['table_number'],
            'quantity': row['quantity'],
            'restaurant_name': row['restaurant__name'],
            'dish_name': row['dish__name'] or 'Removed dish',
            'dish_price': row['dish__price'],
        }
        for row in rows
    ]


def search(restaurants, users, term):
    term = (term or '').strip().lower()
    if not term:
        return restaurants, users
    restaurants = [
        r for r in restaurants
        if term in (r.get('name') or '').lower() or term in (r.get('location') or '').lower()
    ]
    users = [u for u in users if term in (u.get('full_name') or '').lower()]
    return restaurants, users
