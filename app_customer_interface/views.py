# app_customer_interface/views.py
import logging

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.urls import reverse
from django.views.decorators.http import require_POST

from .cart import Cart
from .catalog import load_catalog, list_restaurants
from .checkout import (
    CheckoutError,
    CheckoutInProgress,
    CheckoutSubmitter,
    CheckoutValidationError,
    submission_guard,
)
from .data_store import RowNotFound, StoreError, get_store
from .decorators import menu_session_required
from .forms import CheckoutForm
from .menu_session import has_valid_menu_token, issue_menu_token, menu_cookie_name
from .records import DishRecord, OrderRecord, RecordError

logger = logging.getLogger(__name__)


def is_ajax(request):
    return request.META.get('HTTP_X_REQUESTED_WITH') == 'XMLHttpRequest'


def cart_payload(cart):
    return {
        'lines': [
            {
                'dish_id': line.dish.id,
                'name': line.dish.name,
                'price': str(line.dish.price),
                'quantity': line.quantity,
                'preparation_time_minutes': line.dish.preparation_time_minutes,
                'line_total': str(line.line_total),
            }
            for line in cart
        ],
        'total_price': str(cart.total_price()),
        'total_items': cart.total_items(),
    }


def index_view(request):
    restaurants, notices = list_restaurants(get_store())
    for notice in notices:
        messages.error(request, notice)
    return render(request, 'app_customer_interface/index.html', {'restaurants': restaurants})


def menu_view(request, restaurant_id):
    catalog = load_catalog(get_store(), restaurant_id)
    if catalog.restaurant is None:
        return render(request, 'app_customer_interface/restaurant_not_found.html', status=404)
    for notice in catalog.notices:
        messages.error(request, notice)
    return render(request, 'app_customer_interface/menu.html', {
        'restaurant': catalog.restaurant,
        'dishes': catalog.dishes,
    })


def customer_menu_view(request, restaurant_id):
    catalog = load_catalog(get_store(), restaurant_id)
    if catalog.restaurant is None:
        return render(request, 'app_customer_interface/restaurant_not_found.html', status=404)
    for notice in catalog.notices:
        messages.error(request, notice)

    cart = Cart.from_session(request.session, restaurant_id)
    context = {
        'restaurant': catalog.restaurant,
        'dishes': catalog.dishes,
        'cart': cart,
        'total_price': cart.total_price(),
        'total_items': cart.total_items(),
        'form': CheckoutForm(),
    }
    response = render(request, 'app_customer_interface/customer_menu.html', context)

    if not has_valid_menu_token(request, restaurant_id):
        token, expiration = issue_menu_token(restaurant_id)
        max_age = int(settings.MENU_TOKEN_HOURS * 3600)
        response.set_cookie(
            menu_cookie_name(restaurant_id), token,
            max_age=max_age, httponly=True, secure=settings.SESSION_COOKIE_SECURE, samesite='Lax',
        )
    return response


@require_POST
@menu_session_required
def add_to_cart_view(request, restaurant_id, dish_id):
    store = get_store()
    try:
        row = store.single('dishes', {'id': dish_id, 'restaurant_id': restaurant_id, 'availability': True})
        dish = DishRecord.from_row(row)
    except RowNotFound:
        if is_ajax(request):
            return JsonResponse({'status': 'error', 'message': 'Dish is not available.'}, status=400)
        messages.error(request, 'Dish is not available.')
        return redirect('customer_menu', restaurant_id=restaurant_id)
    except (StoreError, RecordError) as e:
        logger.error("Failed to load dish %s: %s", dish_id, e)
        if is_ajax(request):
            return JsonResponse({'status': 'error', 'message': 'Failed to load dish.'}, status=400)
        messages.error(request, 'Failed to load dish.')
        return redirect('customer_menu', restaurant_id=restaurant_id)

    cart = Cart.from_session(request.session, restaurant_id)
    cart.add(dish)
    cart.save(request.session)

    acknowledgment = f"{dish.name} added to your order"
    if is_ajax(request):
        payload = cart_payload(cart)
        payload.update({'status': 'success', 'message': acknowledgment})
        return JsonResponse(payload)
    messages.success(request, acknowledgment)
    return redirect('customer_menu', restaurant_id=restaurant_id)


@require_POST
@menu_session_required
def remove_from_cart_view(request, restaurant_id, dish_id):
    cart = Cart.from_session(request.session, restaurant_id)
    cart.remove(dish_id)
    cart.save(request.session)

    if is_ajax(request):
        payload = cart_payload(cart)
        payload['status'] = 'success'
        return JsonResponse(payload)
    return redirect('customer_menu', restaurant_id=restaurant_id)


@require_POST
@menu_session_required
def place_order_view(request, restaurant_id):
    form = CheckoutForm(request.POST)
    form.is_valid()
    table_number = form.cleaned_data.get('table_number', '')
    customer_notes = form.cleaned_data.get('customer_notes', '')

    if not request.session.session_key:
        request.session.save()

    cart = Cart.from_session(request.session, restaurant_id)
    submitter = CheckoutSubmitter(get_store(), restaurant_id)

    try:
        with submission_guard(request.session.session_key):
            result = submitter.submit(cart, table_number, customer_notes)
    except CheckoutValidationError as e:
        return _checkout_failed(request, restaurant_id, str(e), "Missing information")
    except CheckoutInProgress as e:
        return _checkout_failed(request, restaurant_id, str(e), "Please wait")
    except CheckoutError as e:
        # Rows written before the failure stay; the cart is kept for a retry
        return _checkout_failed(request, restaurant_id, str(e), "Order failed")

    cart.save(request.session)

    redirect_url = reverse('order_success', kwargs={'order_id': result.order_id})
    notice = f"Order ID: {result.short_id}... - Total: ${result.total_price:.2f}"
    if is_ajax(request):
        return JsonResponse({
            'status': 'success',
            'message': 'Order placed successfully!',
            'order_id': result.order_id,
            'order_ids': result.order_ids,
            'total_amount': str(result.total_price),
            'redirect_url': redirect_url,
            'redirect_delay_ms': settings.CHECKOUT_REDIRECT_DELAY_MS,
        })

    messages.success(request, f"Order placed successfully! {notice}")
    return render(request, 'app_customer_interface/order_placed.html', {
        'result': result,
        'redirect_url': redirect_url,
        'redirect_delay_seconds': settings.CHECKOUT_REDIRECT_DELAY_MS / 1000,
    })


def _checkout_failed(request, restaurant_id, message, title):
    if is_ajax(request):
        return JsonResponse({'status': 'error', 'title': title, 'message': message}, status=400)
    messages.error(request, f"{title}: {message}")
    return redirect('customer_menu', restaurant_id=restaurant_id)


def order_success_view(request, order_id):
    try:
        row = get_store().single(
            'orders', {'id': order_id},
            columns=('id', 'restaurant_id', 'dish_id', 'quantity', 'table_number',
                     'customer_notes', 'status', 'created_at'),
        )
        order = OrderRecord.from_row(row)
    except RowNotFound:
        return render(request, 'app_customer_interface/order_error.html', status=404)
    except (StoreError, RecordError) as e:
        logger.error("Failed to load order %s: %s", order_id, e)
        return render(request, 'app_customer_interface/order_error.html', status=404)

    return render(request, 'app_customer_interface/order_success.html', {
        'order': order,
        'estimated_time': settings.ORDER_ESTIMATED_TIME,
    })
