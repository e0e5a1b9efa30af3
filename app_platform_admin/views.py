# app_platform_admin/views.py
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from app_customer_interface.data_store import StoreError, get_store
from app_owner_admin_panel.decorators import allowed_user
from .stats import AdminStats, platform_stats, recent_orders, restaurants_overview, search, users_overview

logger = logging.getLogger(__name__)


@login_required(login_url='login')
@allowed_user(allowed_roles=[settings.PLATFORM_ADMIN_GROUP])
def admin_panel_view(request):
    store = get_store()
    search_term = request.GET.get('q', '')

    try:
        stats = platform_stats(store)
        restaurants = restaurants_overview(store)
        users = users_overview(store)
        orders = recent_orders(store)
    except StoreError as e:
        logger.error("Failed to load admin data: %s", e)
        messages.error(request, 'Failed to load admin data')
        stats, restaurants, users, orders = AdminStats(), [], [], []

    restaurants, users = search(restaurants, users, search_term)

    context = {
        'stats': stats,
        'restaurants': restaurants,
        'users': users,
        'recent_orders': orders,
        'search_term': search_term,
    }
    return render(request, 'app_platform_admin/admin_panel.html', context)
