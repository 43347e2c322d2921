from django.apps import AppConfig


class SubscriptionsConfig(AppConfig):
    name = "app.subscriptions"
    label = "subscriptions"
