from django.apps import AppConfig


class IotsConfig(AppConfig):
    name = "app.iots"
    label = "iots"
