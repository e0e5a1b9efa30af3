# app_customer_interface/menu_session.py
from datetime import timedelta

import jwt
from django.conf import settings
from django.utils import timezone

ALGORITHM = 'HS256'


class MenuSessionError(Exception):
    pass


class MenuSessionExpired(MenuSessionError):
    pass


class MenuSessionInvalid(MenuSessionError):
    pass


def menu_cookie_name(restaurant_id):
    """One cookie per restaurant; tokens for different menus live side by side."""
    return f"{settings.MENU_TOKEN_COOKIE}_{restaurant_id}"


def issue_menu_token(restaurant_id):
    """Token binding this browser to one restaurant's menu for a few hours."""
    expiration = timezone.now() + timedelta(hours=settings.MENU_TOKEN_HOURS)
    token = jwt.encode(
        {'restaurant_id': str(restaurant_id), 'exp': expiration},
        settings.MENU_TOKEN_SECRET,
        algorithm=ALGORITHM,
    )
    return token, expiration


def read_menu_token(token, restaurant_id):
    if not token:
        raise MenuSessionInvalid("Missing menu token")
    try:
        payload = jwt.decode(token, settings.MENU_TOKEN_SECRET, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise MenuSessionExpired("Menu token has expired")
    except jwt.InvalidTokenError:
        raise MenuSessionInvalid("Menu token is invalid")
    if payload.get('restaurant_id') != str(restaurant_id):
        raise MenuSessionInvalid("Menu token belongs to another restaurant")
    return payload


def has_valid_menu_token(request, restaurant_id):
    try:
        read_menu_token(request.COOKIES.get(menu_cookie_name(restaurant_id)), restaurant_id)
    except MenuSessionError:
        return False
    return True
