"""
URL configuration for the retro_tracker project.
"""
from django.contrib import admin
from django.urls import path

from community.views import UserProfileView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("user/<str:username>/", UserProfileView.as_view(), name="user_profile"),
]
