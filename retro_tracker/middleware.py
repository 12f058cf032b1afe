from django.utils import timezone
from django.conf import settings
import pytz


class TimezoneMiddleware:
    """Render dates in the signed-in user's timezone, falling back to TIME_ZONE."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        tzname = settings.TIME_ZONE
        user = getattr(request, 'user', None)
        if user is not None and user.is_authenticated and getattr(user, 'user_timezone', None):
            tzname = user.user_timezone

        try:
            timezone.activate(pytz.timezone(tzname))
        except pytz.UnknownTimeZoneError:
            timezone.activate(pytz.timezone(settings.TIME_ZONE))

        try:
            return self.get_response(request)
        finally:
            timezone.deactivate()
