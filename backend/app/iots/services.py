# app/iots/services.py
import logging
from typing import Optional

from django.db import DatabaseError

from app.common.exceptions import Unexpected
from .models import Iot

logger = logging.getLogger(__name__)


def bind_device(user, iot_id: str, name: Optional[str] = None) -> Iot:
    """
    기기 등록 (upsert).
    이미 등록된 고유번호면 소유자/이름을 덮어쓴다. 다른 사람에게 재등록도 정상 동작.
    """
    try:
        iot, created = Iot.objects.update_or_create(
            iot_id=iot_id,
            defaults={"user": user, "name": name},
        )
    except DatabaseError as e:
        raise Unexpected(e)

    logger.info("iot %s iot_id=%s user=%s", "bound" if created else "rebound", iot_id, user.id)
    return iot


def list_devices(user):
    return list(Iot.objects.filter(user=user).order_by("-updated_at", "-id"))
