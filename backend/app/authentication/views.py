# app/authentication/views.py
from rest_framework.views import APIView

from app.common.responses import ok
from app.common.validation import validate_or_reject
from app.sms_verifications.services import (
    OTP_EXPIRE_SECONDS,
    issue_otp,
    verify_otp,
)
from . import services
from .serializers import (
    LoginSerializer,
    OtpRequestSerializer,
    OtpVerifySerializer,
    SignupSerializer,
    SocialSignupSerializer,
)


class OtpRequestView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        data = validate_or_reject(OtpRequestSerializer(data=request.data))
        issue_otp(data["phoneNumber"])
        return ok({"expiresInSec": OTP_EXPIRE_SECONDS})


class OtpVerifyView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        data = validate_or_reject(OtpVerifySerializer(data=request.data))
        verify_otp(data["phoneNumber"], data["code"])
        return ok({"verified": True})


class SignupView(APIView):
    authentication_classes = []
    permission_classes = []

    # POST /api/auth/signup
    def post(self, request):
        data = validate_or_reject(SignupSerializer(data=request.data))

        token = services.register_local(
            login_id=data["id"],
            password=data["pw"],
            email=data["email"],
            phone_number=data["phoneNumber"],
            name=data["name"],
            gender=data["gender"],
            auto_login=data["autoLogin"],
            device_token=data["deviceToken"],
        )
        return ok({"token": token})


class SocialSignupView(APIView):
    authentication_classes = []
    permission_classes = []

    # POST /api/auth/signup/social
    def post(self, request):
        data = validate_or_reject(SocialSignupSerializer(data=request.data))

        token = services.register_social(
            provider=data["provider"],
            access_token=data["accessToken"],
            email=data["email"],
            phone_number=data["phoneNumber"],
            name=data["name"],
            gender=data["gender"],
            auto_login=data["autoLogin"],
            device_token=data["deviceToken"],
        )
        return ok({"token": token})


class LoginView(APIView):
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        data = validate_or_reject(LoginSerializer(data=request.data))

        token = services.login(
            request,
            login_id=data["id"],
            password=data["pw"],
            auto_login=data["autoLogin"],
        )
        return ok({"token": token})
