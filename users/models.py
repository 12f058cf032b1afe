from django.db import models
from django.contrib.auth.models import AbstractUser
from django.utils.translation import gettext_lazy as _
import pytz


class CustomUser(AbstractUser):
    email = models.EmailField(_("email address"), unique=True, blank=False, null=False)
    user_timezone = models.CharField(max_length=63, choices=[(tz, tz) for tz in pytz.common_timezones], default='UTC', help_text="User's preferred timezone. UTC default.")
    motto = models.CharField(max_length=50, blank=True)
    untracked = models.BooleanField(default=False, help_text="Untracked users are hidden from public profile pages.")

    REQUIRED_FIELDS = ["email"]

    class Meta:
        indexes = [
            models.Index(fields=["email"], name="user_email_idx"),
        ]

    def get_display_timezone(self):
        try:
            return pytz.timezone(self.user_timezone)
        except pytz.UnknownTimeZoneError:
            return pytz.UTC
