# app/users/models.py
from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager


class Provider(models.TextChoices):
    LOCAL = "local", "Local"
    NAVER = "naver", "Naver"
    KAKAO = "kakao", "Kakao"


class Gender(models.IntegerChoices):
    UNSPECIFIED = 0, "Unspecified"
    MALE = 1, "Male"
    FEMALE = 2, "Female"


class UserQuerySet(models.QuerySet):
    def alive(self):
        # soft-delete 되지 않은 계정만
        return self.filter(deleted_at__isnull=True)

    def find_by_phone(self, phone_number: str):
        return self.alive().filter(phone_number=phone_number).first()

    def find_by_login_id(self, login_id: str):
        return self.alive().filter(login_id=login_id).first()

    def find_by_phone_or_sns_id(self, phone_number: str, provider: str, sns_id: str):
        return (
            self.alive()
            .filter(
                models.Q(phone_number=phone_number)
                | models.Q(provider=provider, sns_id=sns_id)
            )
            # 번호 일치 건이 항상 먼저
            .annotate(
                phone_hit=models.Case(
                    models.When(phone_number=phone_number, then=models.Value(0)),
                    default=models.Value(1),
                )
            )
            .order_by("phone_hit", "id")
            .first()
        )


class UserManager(BaseUserManager.from_queryset(UserQuerySet)):
    use_in_migrations = True

    def create_user(self, phone_number, password=None, **extra_fields):
        if not phone_number:
            raise ValueError("phone_number must be set")

        phone_number = str(phone_number).strip()
        email = extra_fields.pop("email", None)
        user = self.model(
            phone_number=phone_number,
            email=self.normalize_email(email) if email else "",
            **extra_fields,
        )

        # 로컬 계정만 비밀번호를 가진다 (소셜 계정은 사용 불가 비밀번호)
        if user.provider == Provider.LOCAL:
            if not password:
                raise ValueError("local account requires a password")
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, login_id, password, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_active", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(login_id=login_id, password=password, **extra_fields)


class User(AbstractUser):
    # username 대신 login_id (소셜 계정은 없음)
    username = None
    first_name = None
    last_name = None

    login_id = models.CharField(max_length=20, null=True, blank=True)
    phone_number = models.CharField(max_length=11)

    # 서비스 필드
    name = models.CharField(max_length=10)
    gender = models.PositiveSmallIntegerField(
        choices=Gender.choices, default=Gender.UNSPECIFIED
    )
    provider = models.CharField(
        max_length=10, choices=Provider.choices, default=Provider.LOCAL
    )
    sns_id = models.CharField(max_length=255, null=True, blank=True)
    device_token = models.TextField(null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    USERNAME_FIELD = "login_id"
    REQUIRED_FIELDS = ["phone_number", "name"]

    objects = UserManager()

    class Meta:
        constraints = [
            # 탈퇴하지 않은 계정 사이에서만 유일
            models.UniqueConstraint(
                fields=["login_id"],
                condition=models.Q(deleted_at__isnull=True),
                name="uniq_login_id_if_alive",
            ),
            models.UniqueConstraint(
                fields=["phone_number"],
                condition=models.Q(deleted_at__isnull=True),
                name="uniq_phone_number_if_alive",
            ),
            models.UniqueConstraint(
                fields=["provider", "sns_id"],
                condition=models.Q(deleted_at__isnull=True, sns_id__isnull=False),
                name="uniq_provider_sns_id_if_alive",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(provider=Provider.LOCAL, login_id__isnull=False)
                    | (~models.Q(provider=Provider.LOCAL) & models.Q(login_id__isnull=True))
                ),
                name="login_id_only_for_local",
            ),
        ]

    @property
    def is_social(self) -> bool:
        return self.provider != Provider.LOCAL

    def __str__(self):
        return f"{self.id} {self.login_id or self.provider} {self.phone_number}"
