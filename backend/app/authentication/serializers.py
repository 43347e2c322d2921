# app/authentication/serializers.py
# 필드 선언 순서가 곧 검증 순서 (첫 번째 실패만 응답)
from rest_framework import serializers

from app.common.validation import (
    EMAIL_REGEX,
    ID_REGEX,
    ONLY_NUMBER_REGEX,
    PW_REGEX,
    StrictBooleanField,
    StrictCharField,
    messages,
    regex_validator,
)
from app.users.models import Provider

ID_MESSAGE = "id format is invalid"
PW_MESSAGE = "password format is invalid"
EMAIL_MESSAGE = "email format is invalid"
PHONE_MESSAGE = "phone number format is invalid"
NAME_MESSAGE = "name format is invalid"
GENDER_MESSAGE = "gender format is invalid"
AUTO_LOGIN_MESSAGE = "autoLogin format is invalid"


def _email_field():
    return serializers.CharField(
        required=False,
        allow_null=True,
        allow_blank=True,
        default=None,
        error_messages=messages(EMAIL_MESSAGE),
        validators=[regex_validator(EMAIL_REGEX, EMAIL_MESSAGE)],
    )


def _phone_field():
    return StrictCharField(
        trim_whitespace=False,
        min_length=10,
        max_length=11,
        error_messages=messages(PHONE_MESSAGE),
        validators=[regex_validator(ONLY_NUMBER_REGEX, PHONE_MESSAGE)],
    )


def _name_field():
    # 앞뒤 공백 포함 길이로 검사
    return StrictCharField(
        trim_whitespace=False,
        min_length=2,
        max_length=10,
        error_messages=messages(NAME_MESSAGE),
    )


def _gender_field():
    return serializers.IntegerField(
        required=False,
        allow_null=True,
        default=None,
        error_messages=messages(GENDER_MESSAGE),
    )


def _auto_login_field():
    return StrictBooleanField(default=False, error_messages=messages(AUTO_LOGIN_MESSAGE))


def _device_token_field():
    return serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )


class SignupSerializer(serializers.Serializer):
    id = serializers.CharField(
        error_messages=messages(ID_MESSAGE),
        validators=[regex_validator(ID_REGEX, ID_MESSAGE)],
    )
    pw = serializers.CharField(
        trim_whitespace=False,
        error_messages=messages(PW_MESSAGE),
        validators=[regex_validator(PW_REGEX, PW_MESSAGE)],
    )
    email = _email_field()
    phoneNumber = _phone_field()
    name = _name_field()
    gender = _gender_field()
    autoLogin = _auto_login_field()
    deviceToken = _device_token_field()

    def validate_gender(self, value):
        # 0/미입력은 "선택 안 함"
        if value and value not in (1, 2):
            raise serializers.ValidationError(GENDER_MESSAGE)
        return value or 0


class SocialSignupSerializer(serializers.Serializer):
    email = _email_field()
    phoneNumber = _phone_field()
    name = _name_field()
    gender = _gender_field()
    provider = serializers.ChoiceField(
        choices=[Provider.NAVER, Provider.KAKAO],
        error_messages=messages("provider must be naver or kakao"),
    )
    accessToken = serializers.CharField(
        error_messages=messages("accessToken does not exist")
    )
    autoLogin = _auto_login_field()
    deviceToken = _device_token_field()

    def validate_gender(self, value):
        if value is not None and value not in (0, 1, 2):
            raise serializers.ValidationError(GENDER_MESSAGE)
        return value or 0


class LoginSerializer(serializers.Serializer):
    id = serializers.CharField(error_messages=messages("id is required"))
    pw = serializers.CharField(
        trim_whitespace=False, error_messages=messages("pw is required")
    )
    autoLogin = _auto_login_field()


class OtpRequestSerializer(serializers.Serializer):
    phoneNumber = serializers.CharField(error_messages=messages("phoneNumber is required"))


class OtpVerifySerializer(serializers.Serializer):
    phoneNumber = serializers.CharField(error_messages=messages("phoneNumber is required"))
    code = serializers.CharField(error_messages=messages("code is required"))
