from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from app.iots.services import bind_device
from app.subscriptions.services import get_active_window, subscribe
from app.users.models import Provider, User


class Command(BaseCommand):
    help = "Seed dummy accounts, devices and subscriptions for local development"

    @transaction.atomic
    def handle(self, *args, **options):
        now = timezone.now()

        # 1) Users (로컬 2명, 소셜 2명)
        users_data = [
            dict(
                phone_number="01012345678",
                login_id="devuser01",
                name="김철수",
                gender=1,
                email="dev01@example.com",
                provider=Provider.LOCAL,
                device_token="dummy-fcm-token-01",
            ),
            dict(
                phone_number="01098765432",
                login_id="devuser02",
                name="최지민",
                gender=2,
                provider=Provider.LOCAL,
            ),
            dict(
                phone_number="01011112222",
                name="박한길",
                provider=Provider.NAVER,
                sns_id="naver-dummy-0001",
            ),
            dict(
                phone_number="01033334444",
                name="최순자",
                gender=2,
                provider=Provider.KAKAO,
                sns_id="1000000001",
            ),
        ]

        created_count = 0
        for u in users_data:
            if User.objects.find_by_phone(u["phone_number"]):
                continue
            password = "test1234!" if u["provider"] == Provider.LOCAL else None
            User.objects.create_user(password=password, **u)
            created_count += 1

        self.stdout.write(
            self.style.SUCCESS(f"✅ users done (created={created_count})")
        )

        # 2) Iots (김철수 기기 2대)
        owner = User.objects.find_by_phone("01012345678")
        for iot_id, name in [("IOT-DUMMY-0001", "주방"), ("IOT-DUMMY-0002", "거실")]:
            bind_device(owner, iot_id, name)

        self.stdout.write(self.style.SUCCESS("✅ iots done"))

        # 3) Subscriptions (김철수만 구독 중, 이미 구독 중이면 연장하지 않음)
        if get_active_window(owner, now=now) is None:
            subscribe(owner, now=now)

        self.stdout.write(self.style.SUCCESS("✅ subscriptions done"))
