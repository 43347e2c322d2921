# app/users/urls.py
from django.urls import path
from .views import DeviceTokenView, MeView

urlpatterns = [
    path("me", MeView.as_view()),  # GET /api/users/me
    path("me/", MeView.as_view()),
    path("me/device-token", DeviceTokenView.as_view()),  # PATCH
    path("me/device-token/", DeviceTokenView.as_view()),
]
