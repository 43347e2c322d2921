# app/authentication/tokens.py
from django.conf import settings
from rest_framework_simplejwt.tokens import AccessToken


def issue_session_token(user, auto_login: bool = False) -> str:
    """
    세션 토큰 발급.
    기본 만료는 SIMPLE_JWT.ACCESS_TOKEN_LIFETIME, 자동 로그인이면 14일.
    """
    token = AccessToken.for_user(user)
    if auto_login:
        token.set_exp(lifetime=settings.AUTO_LOGIN_TOKEN_LIFETIME)
    return str(token)
