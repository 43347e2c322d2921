# app/notifications/push.py
import logging
import os

import firebase_admin
from firebase_admin import credentials, messaging
from django.conf import settings

logger = logging.getLogger(__name__)

_firebase_app = None


def get_firebase_app():
    """Firebase Admin SDK 지연 초기화"""
    global _firebase_app
    if _firebase_app is not None:
        return _firebase_app

    try:
        _firebase_app = firebase_admin.get_app()
        return _firebase_app
    except ValueError:
        pass

    cred_path = settings.FIREBASE_CREDENTIALS
    if cred_path and os.path.exists(cred_path):
        cred = credentials.Certificate(cred_path)
    else:
        # GCP 환경 기본 자격 증명
        cred = credentials.ApplicationDefault()

    _firebase_app = firebase_admin.initialize_app(cred)
    return _firebase_app


class PushSender:
    def send(self, device_token: str, title: str, body: str) -> str:
        """FCM 으로 알림 전송. 실패하면 firebase 예외가 그대로 올라간다."""
        message = messaging.Message(
            notification=messaging.Notification(title=title, body=body),
            token=device_token,
        )
        message_id = messaging.send(message, app=get_firebase_app())
        logger.info("push sent message_id=%s", message_id)
        return message_id
