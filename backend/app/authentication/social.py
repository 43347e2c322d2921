# app/authentication/social.py
import logging
from typing import Optional

import requests
from django.conf import settings

from app.users.models import Provider

logger = logging.getLogger(__name__)


class SocialTokenVerifier:
    """소셜 access token -> provider 쪽 고유 id(sns_id) 교환"""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = None):
        self.session = session or requests.Session()
        self.timeout = timeout or settings.SOCIAL_TOKEN_TIMEOUT_SEC

    def _profile_url(self, provider: str) -> str:
        if provider == Provider.NAVER:
            return settings.NAVER_PROFILE_URL
        if provider == Provider.KAKAO:
            return settings.KAKAO_PROFILE_URL
        raise ValueError(f"unsupported provider: {provider}")

    def exchange(self, access_token: str, provider: str) -> Optional[str]:
        """만료/위조/통신 실패면 None"""
        try:
            res = self.session.get(
                self._profile_url(provider),
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException:
            logger.warning("social token exchange failed provider=%s", provider, exc_info=True)
            return None

        if res.status_code != 200:
            logger.info(
                "social token rejected provider=%s status=%s", provider, res.status_code
            )
            return None

        try:
            body = res.json()
        except ValueError:
            return None

        # naver: {"resultcode": "00", "response": {"id": ...}} / kakao: {"id": 123}
        if provider == Provider.NAVER:
            body = body.get("response") if isinstance(body, dict) else None
        if not isinstance(body, dict):
            logger.info("social profile has unexpected shape provider=%s", provider)
            return None
        sns_id = body.get("id")

        return str(sns_id) if sns_id else None
