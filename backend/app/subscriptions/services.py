# app/subscriptions/services.py
import logging
from datetime import datetime
from typing import Optional

from dateutil.relativedelta import relativedelta
from django.db import DatabaseError, transaction
from django.utils import timezone

from app.common.exceptions import Unexpected
from app.users.models import User
from .models import UserSubscription

logger = logging.getLogger(__name__)


def add_one_month(ts: datetime) -> datetime:
    # 달력 기준 한 달 (1/31 -> 2/29 or 2/28), 서비스 타임존 날짜로 계산
    return timezone.localtime(ts) + relativedelta(months=1)


def get_active_window(user, now: Optional[datetime] = None) -> Optional[UserSubscription]:
    now = now or timezone.now()
    return (
        UserSubscription.objects.filter(
            user=user, started_at__lte=now, expired_at__gte=now
        )
        .order_by("-expired_at")
        .first()
    )


def serialize_window(window: Optional[UserSubscription]) -> dict:
    data = {"subscribeState": window is not None}
    if window:
        data["startDate"] = timezone.localtime(window.started_at).isoformat()
        data["endDate"] = timezone.localtime(window.expired_at).isoformat()
    return data


def get_subscribe_state(user, now: Optional[datetime] = None) -> dict:
    try:
        window = get_active_window(user, now)
    except DatabaseError as e:
        raise Unexpected(e)
    return serialize_window(window)


def subscribe(user, now: Optional[datetime] = None) -> UserSubscription:
    """
    구독하기. 유효한 기간이 있으면 현재 만료일에서 한 달 연장(누적),
    없으면 지금부터 한 달짜리 기간을 새로 연다. 두 번 부르면 두 번 연장된다.
    """
    try:
        with transaction.atomic():
            # 같은 유저의 구독 요청은 유저 row 잠금으로 직렬화
            list(User.objects.select_for_update().filter(pk=user.pk).values_list("pk", flat=True))

            now = now or timezone.now()
            window = get_active_window(user, now)
            if window:
                window.expired_at = add_one_month(window.expired_at)
                window.save(update_fields=["expired_at"])
                logger.info("subscription extended user=%s until=%s", user.pk, window.expired_at)
            else:
                window = UserSubscription.objects.create(
                    user=user, started_at=now, expired_at=add_one_month(now)
                )
                logger.info("subscription started user=%s until=%s", user.pk, window.expired_at)
    except DatabaseError as e:
        raise Unexpected(e)

    return window
