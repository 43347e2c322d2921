# app/config/urls.py
from django.contrib import admin
from django.urls import path, include


urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("app.authentication.urls")),
    path("api/users/", include("app.users.urls")),
    path("api/", include("app.iots.urls")),
    path("api/", include("app.subscriptions.urls")),
    path("api/notifications/", include("app.notifications.urls")),
]
