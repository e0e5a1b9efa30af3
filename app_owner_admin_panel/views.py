# app_owner_admin_panel/views.py
import logging

from axes.decorators import axes_dispatch
from django.contrib import messages
from django.contrib.auth import authenticate, login, logout
from django.contrib.messages import get_messages
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render, redirect, get_object_or_404
from django.views.decorators.http import require_POST

from app_customer_interface.data_store import StoreError, get_store
from app_customer_interface.models import Order
from .decorators import owner_view, unauthenticated_user, is_platform_admin
from .forms import DishForm, LoginForm, OrderStatusForm, RestaurantForm, SignUpForm
from .models import Dish
from .qr_codes import menu_url, qr_filename, qr_png_bytes

logger = logging.getLogger(__name__)


def is_ajax(request):
    return request.META.get('HTTP_X_REQUESTED_WITH') == 'XMLHttpRequest'


def _after_login_redirect(user):
    if is_platform_admin(user):
        return redirect('platform_admin')
    return redirect('dashboard')


@axes_dispatch
@unauthenticated_user
def login_view(request):
    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            username = form.cleaned_data.get('username')
            password = form.cleaned_data.get('password')
            user = authenticate(request, username=username, password=password)
            if user is not None:
                login(request, user)
                return _after_login_redirect(user)

            # Only ever show the latest failure
            storage = get_messages(request)
            storage.used = True
            messages.error(request, 'Login attempt failed. Please check your credentials.')
    else:
        form = LoginForm()

    return render(request, 'app_owner_admin_panel/login.html', {'form': form})


@unauthenticated_user
def signup_view(request):
    if request.method == 'POST':
        form = SignUpForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend='django.contrib.auth.backends.ModelBackend')
            messages.success(request, 'Account created! Set up your restaurant to get started.')
            return redirect('restaurant_setup')
    else:
        form = SignUpForm()

    return render(request, 'app_owner_admin_panel/signup.html', {'form': form})


def logout_view(request):
    logout(request)
    return redirect('login')


@owner_view()
def dashboard_view(request, owner):
    orders = (
        Order.objects
        .filter(restaurant__owner=owner.user)
        .select_related('dish', 'restaurant')
        .order_by('-created_at')
    )
    context = {
        'owner': owner,
        'restaurant': owner.restaurant,
        'orders': orders,
        'status_choices': Order.STATUS_CHOICES,
        'menu_url': menu_url(owner.restaurant.id, request=request) if owner.restaurant else '',
    }
    return render(request, 'app_owner_admin_panel/dashboard.html', context)


@require_POST
@owner_view()
def update_order_status_view(request, owner, order_id):
    form = OrderStatusForm(request.POST)
    if not form.is_valid():
        if is_ajax(request):
            return JsonResponse({'status': 'error', 'message': 'Invalid order status.'}, status=400)
        messages.error(request, 'Invalid order status.')
        return redirect('dashboard')

    status = form.cleaned_data['status']
    try:
        updated = get_store().update(
            'orders', {'status': status},
            {'id': order_id, 'restaurant__owner_id': owner.user.id},
        )
    except StoreError as e:
        logger.error("Failed to update order %s: %s", order_id, e)
        updated = None

    if not updated:
        if is_ajax(request):
            return JsonResponse({'status': 'error', 'message': 'Failed to update order status'}, status=400)
        messages.error(request, 'Failed to update order status')
        return redirect('dashboard')

    logger.info("Order %s set to %s by %s", order_id, status, owner.user.get_username())
    if is_ajax(request):
        return JsonResponse({'status': 'success', 'message': 'Order status updated', 'order_status': status})
    messages.success(request, 'Order status updated')
    return redirect('dashboard')


@owner_view(require_restaurant=True)
def qr_code_view(request, owner):
    restaurant = owner.restaurant
    png = qr_png_bytes(menu_url(restaurant.id, request=request))
    response = HttpResponse(png, content_type='image/png')
    if request.GET.get('download'):
        response['Content-Disposition'] = f'attachment; filename="{qr_filename(restaurant.name)}"'
    return response


@owner_view()
def restaurant_setup_view(request, owner):
    if owner.restaurant is not None:
        return redirect('restaurant_edit')

    if request.method == 'POST':
        form = RestaurantForm(request.POST)
        if form.is_valid():
            restaurant = form.save(commit=False)
            restaurant.owner = owner.user
            restaurant.save()
            messages.success(request, 'Restaurant created successfully!')
            return redirect('dashboard')
    else:
        form = RestaurantForm()

    return render(request, 'app_owner_admin_panel/restaurant_setup.html', {'form': form})


@owner_view(require_restaurant=True)
def restaurant_edit_view(request, owner):
    restaurant = owner.restaurant

    if request.method == 'POST':
        form = RestaurantForm(request.POST, instance=restaurant)
        if form.is_valid():
            form.save()
            messages.success(request, 'Restaurant updated successfully! Your changes have been saved.')
            return redirect('dashboard')
        messages.error(request, 'Failed to update restaurant. Please try again.')
    else:
        form = RestaurantForm(instance=restaurant)

    return render(request, 'app_owner_admin_panel/restaurant_edit.html', {'form': form, 'restaurant': restaurant})


@owner_view(require_restaurant=True)
def menu_manage_view(request, owner):
    dishes = Dish.objects.filter(restaurant=owner.restaurant).order_by('-created_at')
    context = {
        'restaurant': owner.restaurant,
        'dishes': dishes,
        'form': DishForm(),
    }
    return render(request, 'app_owner_admin_panel/menu_manage.html', context)


@owner_view(require_restaurant=True)
def add_dish_view(request, owner):
    if request.method == 'POST':
        form = DishForm(request.POST, request.FILES)
        if form.is_valid():
            dish = form.save(commit=False)
            dish.restaurant = owner.restaurant
            dish.save()
            messages.success(request, 'Dish added successfully!')
            return redirect('menu_manage')
        messages.error(request, 'Failed to save dish. Please try again.')
    else:
        form = DishForm()

    return render(request, 'app_owner_admin_panel/dish_form.html', {'form': form, 'dish': None})


@owner_view(require_restaurant=True)
def edit_dish_view(request, owner, dish_id):
    dish = get_object_or_404(Dish, pk=dish_id, restaurant=owner.restaurant)

    if request.method == 'POST':
        form = DishForm(request.POST, request.FILES, instance=dish)
        if form.is_valid():
            form.save()
            messages.success(request, 'Dish updated successfully!')
            return redirect('menu_manage')
        messages.error(request, 'Failed to save dish. Please try again.')
    else:
        form = DishForm(instance=dish)

    return render(request, 'app_owner_admin_panel/dish_form.html', {'form': form, 'dish': dish})


@require_POST
@owner_view(require_restaurant=True)
def toggle_dish_availability_view(request, owner, dish_id):
    dish = get_object_or_404(Dish, pk=dish_id, restaurant=owner.restaurant)
    availability = not dish.availability
    try:
        get_store().update('dishes', {'availability': availability}, {'id': dish.id})
    except StoreError as e:
        logger.error("Failed to toggle availability of dish %s: %s", dish.id, e)
        if is_ajax(request):
            return JsonResponse({'status': 'error', 'message': 'Failed to update availability.'}, status=400)
        messages.error(request, 'Failed to update availability.')
        return redirect('menu_manage')

    message = f"Dish {'enabled' if availability else 'disabled'}"
    if is_ajax(request):
        return JsonResponse({'status': 'success', 'message': message, 'availability': availability})
    messages.success(request, message)
    return redirect('menu_manage')


@require_POST
@owner_view(require_restaurant=True)
def delete_dish_view(request, owner, dish_id):
    dish = get_object_or_404(Dish, pk=dish_id, restaurant=owner.restaurant)
    try:
        get_store().delete('dishes', {'id': dish.id})
        messages.success(request, 'Dish deleted successfully!')
    except StoreError as e:
        logger.error("Failed to delete dish %s: %s", dish.id, e)
        messages.error(request, 'Failed to delete dish.')
    return redirect('menu_manage')
