from dataclasses import dataclass
from functools import wraps
from typing import Optional

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.shortcuts import redirect, render

from .models import Profile, Restaurant


@dataclass
class OwnerContext:
    """Who is signed in and which restaurant they run, built once per request."""
    user: User
    profile: Optional[Profile]
    restaurant: Optional[Restaurant]

    @classmethod
    def for_user(cls, user):
        profile = Profile.objects.filter(user=user).first()
        restaurant = Restaurant.objects.filter(owner=user).order_by('created_at').first()
        return cls(user=user, profile=profile, restaurant=restaurant)

    @property
    def display_name(self):
        if self.profile and self.profile.full_name:
            return self.profile.full_name
        return self.user.get_username()


def is_platform_admin(user):
    if not user.is_authenticated:
        return False
    return user.is_superuser or user.groups.filter(name=settings.PLATFORM_ADMIN_GROUP).exists()


def unauthenticated_user(view_func):
    @wraps(view_func)
    def wrapper_func(request, *args, **kwargs):
        if request.user.is_authenticated:
            if is_platform_admin(request.user):
                return redirect('platform_admin')
            return redirect('dashboard')
        return view_func(request, *args, **kwargs)

    return wrapper_func


def owner_view(require_restaurant=False):
    """
    Sign-in gate for owner pages; the view receives an OwnerContext as its
    second argument. With ``require_restaurant`` owners without a
    restaurant are sent to the setup page.
    """
    def decorator(view_func):
        @login_required(login_url='login')
        @wraps(view_func)
        def wrapper_func(request, *args, **kwargs):
            owner = OwnerContext.for_user(request.user)
            if require_restaurant and owner.restaurant is None:
                return redirect('restaurant_setup')
            return view_func(request, owner, *args, **kwargs)
        return wrapper_func
    return decorator


def allowed_user(allowed_roles=()):
    def decorator(view_func):
        @wraps(view_func)
        def wrapper_func(request, *args, **kwargs):
            if request.user.is_superuser or request.user.groups.filter(name__in=allowed_roles).exists():
                return view_func(request, *args, **kwargs)
            else:
                return render(request, 'app_owner_admin_panel/access_denied.html', {'access_denied': True}, status=403)
        return wrapper_func
    return decorator
