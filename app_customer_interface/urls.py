# app_customer_interface/urls.py

from django.urls import path
from . import views

urlpatterns = [
    path('', views.index_view, name='index'),
    path('menu/<uuid:restaurant_id>/', views.menu_view, name='menu'),
    path('order/<uuid:restaurant_id>/', views.customer_menu_view, name='customer_menu'),
    path('order/<uuid:restaurant_id>/cart/add/<uuid:dish_id>/', views.add_to_cart_view, name='add_to_cart'),
    path('order/<uuid:restaurant_id>/cart/remove/<uuid:dish_id>/', views.remove_from_cart_view, name='remove_from_cart'),
    path('order/<uuid:restaurant_id>/place/', views.place_order_view, name='place_order'),
    path('order-success/<uuid:order_id>/', views.order_success_view, name='order_success'),
]
