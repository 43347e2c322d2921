from datetime import timedelta
from unittest.mock import patch

import pytest
from django.utils import timezone

from app.sms_verifications.models import SmsVerification
from app.sms_verifications.services import OTP_MAX_ATTEMPTS, _hash_code

REQUEST_URL = "/api/auth/otp/request"
VERIFY_URL = "/api/auth/otp/verify"


@pytest.mark.django_db
def test_request_stores_hashed_code_and_sends_sms(api_client):
    with patch("app.sms_verifications.services.send_sms") as send_sms, patch(
        "app.sms_verifications.services.random.randint", return_value=4321
    ):
        res = api_client.post(REQUEST_URL, {"phoneNumber": "010-1234-5678"}, format="json")

    assert res.status_code == 200
    v = SmsVerification.objects.get()
    assert v.phone_number == "01012345678"
    assert v.code_hash == _hash_code("04321")
    to_number, text = send_sms.call_args.args
    assert to_number == "01012345678"
    assert "04321" in text


@pytest.mark.django_db
def test_request_sms_failure_is_unexpected(api_client):
    with patch(
        "app.sms_verifications.services.send_sms", side_effect=RuntimeError("down")
    ):
        res = api_client.post(REQUEST_URL, {"phoneNumber": "01012345678"}, format="json")

    assert res.status_code == 409
    assert res.json()["error"]["code"] == "UNEXPECTED_ERROR"


def _pending(code="12345", **kwargs):
    fields = {
        "phone_number": "01012345678",
        "code_hash": _hash_code(code),
        "expires_at": timezone.now() + timedelta(minutes=3),
    }
    fields.update(kwargs)
    return SmsVerification.objects.create(**fields)


@pytest.mark.django_db
def test_verify_marks_phone_as_verified(api_client, store):
    _pending()

    res = api_client.post(
        VERIFY_URL, {"phoneNumber": "01012345678", "code": "12345"}, format="json"
    )

    assert res.status_code == 200
    assert store.exists("01012345678")
    assert SmsVerification.objects.get().verified_at is not None


@pytest.mark.django_db
def test_verify_wrong_code_counts_attempt(api_client, store):
    _pending()

    res = api_client.post(
        VERIFY_URL, {"phoneNumber": "01012345678", "code": "99999"}, format="json"
    )

    assert res.json()["error"]["code"] == "OTP_INVALID_CODE"
    assert SmsVerification.objects.get().attempt_count == 1
    assert not store.exists("01012345678")


@pytest.mark.django_db
def test_verify_too_many_attempts(api_client):
    _pending(attempt_count=OTP_MAX_ATTEMPTS)

    res = api_client.post(
        VERIFY_URL, {"phoneNumber": "01012345678", "code": "12345"}, format="json"
    )

    assert res.json()["error"]["code"] == "OTP_TOO_MANY_ATTEMPTS"


@pytest.mark.django_db
def test_verify_expired_code(api_client):
    _pending(expires_at=timezone.now() - timedelta(seconds=1))

    res = api_client.post(
        VERIFY_URL, {"phoneNumber": "01012345678", "code": "12345"}, format="json"
    )

    assert res.json()["error"]["code"] == "OTP_NOT_FOUND_OR_EXPIRED"


def test_verification_record_expires(store, fake_redis, settings):
    store.mark_verified("01012345678")

    ttl = fake_redis.ttl("certified-number-01012345678")
    assert 0 < ttl <= settings.PHONE_VERIFIED_TTL_SEC
