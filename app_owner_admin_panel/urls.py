# app_owner_admin_panel/urls.py

from django.urls import path
from . import views

urlpatterns = [
    # login lives in the project urls so axes sees a stable path
    path('auth/signup/', views.signup_view, name='signup'),
    path('auth/logout/', views.logout_view, name='logout'),

    path('dashboard/', views.dashboard_view, name='dashboard'),
    path('dashboard/qr-code.png', views.qr_code_view, name='qr_code'),
    path('dashboard/orders/<uuid:order_id>/status/', views.update_order_status_view, name='update_order_status'),

    path('restaurant/setup/', views.restaurant_setup_view, name='restaurant_setup'),
    path('restaurant/edit/', views.restaurant_edit_view, name='restaurant_edit'),

    # menu items
    path('menu/manage/', views.menu_manage_view, name='menu_manage'),
    path('menu/manage/add/', views.add_dish_view, name='add_dish'),
    path('menu/manage/<uuid:dish_id>/edit/', views.edit_dish_view, name='edit_dish'),
    path('menu/manage/<uuid:dish_id>/toggle/', views.toggle_dish_availability_view, name='toggle_dish_availability'),
    path('menu/manage/<uuid:dish_id>/delete/', views.delete_dish_view, name='delete_dish'),
]
