# app/sms_verifications/services.py
import hashlib
import logging
import os
import random
import re
from datetime import timedelta

from django.conf import settings
from django.utils import timezone
from redis.exceptions import RedisError

from solapi import SolapiMessageService
from solapi.model import RequestMessage

from app.common.exceptions import Rejected, Unexpected
from .models import SmsVerification
from .store import PhoneVerificationStore

logger = logging.getLogger(__name__)

OTP_EXPIRE_SECONDS = 180
OTP_MAX_ATTEMPTS = 3


def _hash_code(code: str) -> str:
    salt = os.environ.get("OTP_SALT", "dev-salt")
    return hashlib.sha256(f"{salt}:{code}".encode("utf-8")).hexdigest()


def normalize_phone(phone: str) -> str:
    # 010-1234-5678 / 010 1234 5678 -> 01012345678
    return re.sub(r"[^0-9]", "", str(phone or ""))


def _solapi_client() -> SolapiMessageService:
    api_key = os.environ.get("SOLAPI_API_KEY", "")
    api_secret = os.environ.get("SOLAPI_API_SECRET", "")
    if not api_key or not api_secret:
        raise RuntimeError("SOLAPI_API_KEY / SOLAPI_API_SECRET not set")
    return SolapiMessageService(api_key=api_key, api_secret=api_secret)


def send_sms(to_number: str, text: str) -> None:
    from_number = normalize_phone(os.environ.get("SOLAPI_FROM_NUMBER", ""))
    if not from_number:
        raise RuntimeError("SOLAPI_FROM_NUMBER not set")

    client = _solapi_client()
    message = RequestMessage(from_=from_number, to=to_number, text=text)
    res = client.send(message)
    logger.info("sms sent to=%s result=%s", to_number, res)


def issue_otp(phone_number: str) -> None:
    to_number = normalize_phone(phone_number)
    if not 10 <= len(to_number) <= 11:
        raise Rejected("VALIDATION_ERROR", "phone number format is invalid")

    code = f"{random.randint(0, 99999):05d}"  # 5자리
    expires_at = timezone.now() + timedelta(seconds=OTP_EXPIRE_SECONDS)

    # 1) OTP 저장
    SmsVerification.objects.create(
        phone_number=to_number,
        code_hash=_hash_code(code),
        expires_at=expires_at,
    )

    # 2) SMS 발송
    text = f"[인증] 인증번호는 {code} 입니다. {OTP_EXPIRE_SECONDS // 60}분 이내 입력하세요."
    try:
        send_sms(to_number, text)
    except Exception as e:
        raise Unexpected(e)


def verify_otp(phone_number: str, code: str, store: PhoneVerificationStore = None) -> None:
    """
    OTP 를 검증하고, 성공하면 인증 완료 기록을 남긴다.
    회원가입은 이 기록이 있어야만 진행된다.
    """
    phone = normalize_phone(phone_number)
    now = timezone.now()

    v = (
        SmsVerification.objects.filter(
            phone_number=phone,
            verified_at__isnull=True,
            expires_at__gt=now,
        )
        .order_by("-created_at", "-id")
        .first()
    )
    if not v:
        raise Rejected("OTP_NOT_FOUND_OR_EXPIRED", "verification code not found or expired")

    if v.attempt_count >= OTP_MAX_ATTEMPTS:
        raise Rejected("OTP_TOO_MANY_ATTEMPTS", "too many attempts, request a new code")

    if v.code_hash != _hash_code(str(code)):
        v.attempt_count += 1
        v.save(update_fields=["attempt_count"])
        raise Rejected("OTP_INVALID_CODE", "verification code does not match")

    # 인증 성공
    v.verified_at = now
    v.save(update_fields=["verified_at"])

    try:
        (store or PhoneVerificationStore()).mark_verified(phone)
    except RedisError as e:
        raise Unexpected(e)

    logger.info(
        "phone verified phone=%s ttl=%ss", phone, settings.PHONE_VERIFIED_TTL_SEC
    )
