from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("id", "login_id", "name", "phone_number", "provider", "deleted_at")
    list_filter = ("provider",)
    search_fields = ("login_id", "phone_number", "name")
    exclude = ("password",)
