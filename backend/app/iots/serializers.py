# app/iots/serializers.py
from rest_framework import serializers

from app.common.validation import messages
from .models import Iot


class IotBindSerializer(serializers.Serializer):
    iot = serializers.CharField(
        max_length=100, error_messages=messages("iot id is invalid")
    )
    name = serializers.CharField(
        required=False,
        allow_null=True,
        default=None,
        min_length=2,
        max_length=10,
        error_messages=messages("name is invalid"),
    )


class IotSerializer(serializers.ModelSerializer):
    iot = serializers.CharField(source="iot_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Iot
        fields = ["iot", "name", "createdAt"]
