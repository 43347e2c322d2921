# app/common/validation.py
import re

from rest_framework import serializers

from .exceptions import Rejected

ID_REGEX = re.compile(r"^[a-z][a-z0-9]{3,19}$")
# 8~20자, 영문/숫자/특수문자 각 1개 이상
PW_REGEX = re.compile(
    r"^(?=.*[A-Za-z])(?=.*\d)(?=.*[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?~`])\S{8,20}$"
)
EMAIL_REGEX = re.compile(r"^[\w.+-]+@[\w-]+(\.[\w-]+)+$")
ONLY_NUMBER_REGEX = re.compile(r"^[0-9]+$")


def regex_validator(pattern, message: str):
    def _validate(value):
        if not pattern.fullmatch(value):
            raise serializers.ValidationError(message)

    return _validate


def validate_or_reject(serializer: serializers.Serializer) -> dict:
    """
    serializer 검증 후 첫 번째 실패를 Rejected 로 올린다.
    필드 선언 순서 = 검증 순서.
    """
    if serializer.is_valid():
        return serializer.validated_data

    for field_name in serializer.fields:
        errors = serializer.errors.get(field_name)
        if errors:
            raise Rejected("VALIDATION_ERROR", str(errors[0]))

    errors = serializer.errors.get("non_field_errors") or ["invalid request"]
    raise Rejected("VALIDATION_ERROR", str(errors[0]))


def messages(message: str) -> dict:
    # 어떤 이유로 실패하든 같은 안내 문구를 쓴다
    return {
        key: message
        for key in (
            "required",
            "null",
            "blank",
            "invalid",
            "min_length",
            "max_length",
            "invalid_choice",
            "max_string_length",
        )
    }


class StrictBooleanField(serializers.Field):
    """문자열 "true" 등은 받지 않고 JSON boolean 만 허용"""

    default_error_messages = {"invalid": "must be a boolean"}

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return bool(value)


class StrictCharField(serializers.CharField):
    """숫자 등을 문자열로 바꿔주지 않고 JSON string 만 허용"""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)
