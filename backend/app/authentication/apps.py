from django.apps import AppConfig


class AuthenticationConfig(AppConfig):
    name = "app.authentication"
    label = "authentication"
