# middleware.py
from datetime import datetime, timedelta

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import logout
from django.utils import timezone


class AutoLogoutMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if request.user.is_authenticated:
            now = timezone.now()
            last_activity_str = request.session.get('last_activity')
            if last_activity_str:
                try:
                    last_activity = datetime.fromisoformat(last_activity_str)
                except ValueError:
                    last_activity = now

                inactivity_timeout = timedelta(minutes=settings.OWNER_INACTIVITY_MINUTES)

                if now - last_activity > inactivity_timeout:
                    logout(request)
                    messages.info(request, 'You have been logged out due to inactivity.')

            if request.user.is_authenticated:
                request.session['last_activity'] = now.isoformat()

        response = self.get_response(request)
        return response
