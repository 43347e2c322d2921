# backend/tests/conftest.py
from unittest.mock import MagicMock

import fakeredis
import pytest
from rest_framework.test import APIClient

from app.authentication.social import SocialTokenVerifier
from app.sms_verifications.store import PhoneVerificationStore
from app.users.models import Provider, User

PHONE = "01012345678"


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch):
    """실제 redis 대신 프로세스 내 fakeredis 사용"""
    client = fakeredis.FakeRedis(decode_responses=True)
    monkeypatch.setattr("app.common.redis_client._redis", client)
    return client


@pytest.fixture(autouse=True)
def fast_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def store(fake_redis):
    return PhoneVerificationStore()


@pytest.fixture
def verified_phone(store):
    store.mark_verified(PHONE)
    return PHONE


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(**kwargs):
        fields = {
            "phone_number": PHONE,
            "name": "tester",
            "provider": Provider.LOCAL,
        }
        fields.update(kwargs)
        if fields["provider"] == Provider.LOCAL:
            fields.setdefault("login_id", "tester01")
            fields.setdefault("password", "secret!234")
        return User.objects.create_user(**fields)

    return _make


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def auth_client(api_client, user):
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def social_verifier(monkeypatch):
    """소셜 토큰 교환 결과를 테스트에서 지정"""
    verifier = MagicMock(spec=SocialTokenVerifier)
    verifier.exchange.return_value = "sns-123"
    monkeypatch.setattr(
        "app.authentication.services.SocialTokenVerifier", lambda: verifier
    )
    return verifier
