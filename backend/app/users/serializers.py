# app/users/serializers.py
from rest_framework import serializers

from app.common.validation import messages
from .models import User


class UserMeSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="id", read_only=True)
    loginId = serializers.CharField(source="login_id", read_only=True)
    phoneNumber = serializers.CharField(source="phone_number", read_only=True)
    hasDeviceToken = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "userId",
            "loginId",
            "name",
            "email",
            "gender",
            "provider",
            "phoneNumber",
            "hasDeviceToken",
        ]

    def get_hasDeviceToken(self, obj: User):
        return bool(obj.device_token)


class DeviceTokenSerializer(serializers.Serializer):
    deviceToken = serializers.CharField(
        max_length=4096,
        error_messages=messages("deviceToken is invalid"),
    )
