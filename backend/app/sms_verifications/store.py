# app/sms_verifications/store.py
import logging

from django.conf import settings
from redis.exceptions import RedisError

from app.common.redis_client import get_redis

logger = logging.getLogger(__name__)


def certified_key(phone_number: str) -> str:
    return f"certified-number-{phone_number}"


class PhoneVerificationStore:
    """
    "이 번호는 휴대폰 인증을 마쳤다" 기록.
    값은 의미 없고 키 존재 여부만 본다. TTL 이 지나면 자동 만료.
    """

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        return self._client or get_redis()

    def mark_verified(self, phone_number: str) -> None:
        self.client.set(
            certified_key(phone_number), "1", ex=settings.PHONE_VERIFIED_TTL_SEC
        )

    def exists(self, phone_number: str) -> bool:
        return bool(self.client.exists(certified_key(phone_number)))

    def delete(self, phone_number: str) -> None:
        # 계정 생성이 이미 커밋된 뒤라 실패해도 TTL 로 정리된다
        try:
            self.client.delete(certified_key(phone_number))
        except RedisError:
            logger.warning(
                "failed to consume verification record phone=%s",
                phone_number,
                exc_info=True,
            )
