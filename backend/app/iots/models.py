# app/iots/models.py
from django.db import models
from app.users.models import User


class Iot(models.Model):
    # 기기 고유번호는 한 번에 한 소유자만 가진다
    iot_id = models.CharField(max_length=100, unique=True)
    user = models.ForeignKey(User, related_name="iots", on_delete=models.CASCADE)
    name = models.CharField(max_length=10, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.iot_id} -> {self.user_id}"
