# app/subscriptions/models.py
from django.db import models
from app.users.models import User


class UserSubscription(models.Model):
    """구독 기간. 한 유저에게 동시에 유효한 기간은 최대 하나."""

    user = models.ForeignKey(
        User, related_name="subscriptions", on_delete=models.CASCADE
    )
    started_at = models.DateTimeField()
    expired_at = models.DateTimeField()

    class Meta:
        indexes = [
            models.Index(fields=["user", "expired_at"], name="subscr_user_expired_idx"),
        ]

    def is_active(self, at) -> bool:
        return self.started_at <= at <= self.expired_at
