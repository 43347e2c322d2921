from django.apps import AppConfig


class SmsVerificationsConfig(AppConfig):
    name = "app.sms_verifications"
    label = "sms_verifications"
