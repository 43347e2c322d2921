# app/notifications/services.py
import logging
from typing import Optional

from django.db import DatabaseError

from app.common.exceptions import Rejected, Unexpected
from app.users.models import User
from .push import PushSender

logger = logging.getLogger(__name__)


def send_push_to_user(
    user_id: int, title: str, body: str, sender: Optional[PushSender] = None
) -> None:
    try:
        user = User.objects.alive().filter(id=user_id).only("id", "device_token").first()
    except DatabaseError as e:
        raise Unexpected(e)

    if not user or not user.device_token:
        raise Rejected("DEVICE_TOKEN_NOT_FOUND", "device token does not exist")

    # 재시도 없음, 실패는 그대로 Unexpected
    try:
        (sender or PushSender()).send(user.device_token, title, body)
    except Exception as e:
        raise Unexpected(e)
