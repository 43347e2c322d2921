from django.urls import path
from .views import (
    LoginView,
    OtpRequestView,
    OtpVerifyView,
    SignupView,
    SocialSignupView,
)

urlpatterns = [
    path("otp/request", OtpRequestView.as_view()),
    path("otp/verify", OtpVerifyView.as_view()),
    path("signup", SignupView.as_view()),
    path("signup/social", SocialSignupView.as_view()),
    path("login", LoginView.as_view()),
    path("otp/request/", OtpRequestView.as_view()),
    path("otp/verify/", OtpVerifyView.as_view()),
    path("signup/", SignupView.as_view()),
    path("signup/social/", SocialSignupView.as_view()),
    path("login/", LoginView.as_view()),
]
