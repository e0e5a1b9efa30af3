from functools import wraps

from django.http import HttpResponseForbidden

from .menu_session import MenuSessionExpired, MenuSessionInvalid, menu_cookie_name, read_menu_token


def menu_session_required(view_func):
    @wraps(view_func)
    def _wrapped_view(request, restaurant_id, *args, **kwargs):
        token = request.COOKIES.get(menu_cookie_name(restaurant_id))
        try:
            request.menu_session = read_menu_token(token, restaurant_id)
        except MenuSessionExpired:
            return HttpResponseForbidden("Expired page. Please scan QR code again.")
        except MenuSessionInvalid:
            return HttpResponseForbidden("Invalid page. Please scan QR code again.")

        return view_func(request, restaurant_id, *args, **kwargs)
    return _wrapped_view
