# app/authentication/services.py
import logging
from typing import Optional

from django.contrib.auth import authenticate
from django.db import DatabaseError, IntegrityError, transaction
from redis.exceptions import RedisError

from app.common.exceptions import Rejected, Unexpected
from app.sms_verifications.store import PhoneVerificationStore
from app.users.models import Provider, User
from .social import SocialTokenVerifier
from .tokens import issue_session_token

logger = logging.getLogger(__name__)


def _not_verified() -> Rejected:
    return Rejected(
        "PHONE_NOT_VERIFIED",
        "phone number is not verified, complete phone verification first",
    )


def _phone_taken(owner: User) -> Rejected:
    if owner.provider == Provider.LOCAL:
        message = "an account with the same phone number already exists"
    else:
        message = f"phone number already registered via {owner.provider} login"
    return Rejected("PHONE_ALREADY_USED", message)


def _id_taken() -> Rejected:
    return Rejected("ID_ALREADY_EXISTS", "id already exists")


def _already_registered() -> Rejected:
    return Rejected("ALREADY_REGISTERED", "account already registered")


def _from_integrity_error(
    err: IntegrityError,
    phone_number: str,
    login_id: Optional[str] = None,
    provider: Optional[str] = None,
    sns_id: Optional[str] = None,
) -> Exception:
    """
    동시 가입으로 사전 조회를 통과했지만 unique 제약에 걸린 경우,
    사전 조회와 같은 사유로 돌려준다.
    """
    owner = User.objects.find_by_phone(phone_number)
    if owner:
        return _phone_taken(owner)
    if login_id and User.objects.find_by_login_id(login_id):
        return _id_taken()
    if sns_id and User.objects.alive().filter(provider=provider, sns_id=sns_id).exists():
        return _already_registered()
    return Unexpected(err)


def _create_and_consume(store: PhoneVerificationStore, phone_number: str, **fields) -> User:
    # 계정 생성이 커밋 지점, 인증 기록 삭제는 커밋 이후 best-effort
    with transaction.atomic():
        user = User.objects.create_user(phone_number=phone_number, **fields)
        transaction.on_commit(lambda: store.delete(phone_number))
    return user


def register_local(
    *,
    login_id: str,
    password: str,
    phone_number: str,
    name: str,
    email: Optional[str] = None,
    gender: int = 0,
    auto_login: bool = False,
    device_token: Optional[str] = None,
    store: Optional[PhoneVerificationStore] = None,
) -> str:
    """아이디/비밀번호 회원가입. 성공하면 세션 토큰 반환."""
    store = store or PhoneVerificationStore()

    try:
        if not store.exists(phone_number):
            raise _not_verified()

        owner = User.objects.find_by_phone(phone_number)
        if owner:
            raise _phone_taken(owner)

        if User.objects.find_by_login_id(login_id):
            raise _id_taken()

        user = _create_and_consume(
            store,
            phone_number,
            login_id=login_id,
            password=password,
            email=email or None,
            name=name,
            gender=gender,
            provider=Provider.LOCAL,
            device_token=device_token or None,
        )
    except IntegrityError as e:
        raise _from_integrity_error(e, phone_number, login_id=login_id)
    except (DatabaseError, RedisError) as e:
        raise Unexpected(e)

    logger.info("local signup user=%s", user.id)
    return issue_session_token(user, auto_login)


def register_social(
    *,
    provider: str,
    access_token: str,
    phone_number: str,
    name: str,
    email: Optional[str] = None,
    gender: int = 0,
    auto_login: bool = False,
    device_token: Optional[str] = None,
    store: Optional[PhoneVerificationStore] = None,
    verifier: Optional[SocialTokenVerifier] = None,
) -> str:
    """naver/kakao 회원가입. 성공하면 세션 토큰 반환."""
    store = store or PhoneVerificationStore()
    verifier = verifier or SocialTokenVerifier()

    sns_id = verifier.exchange(access_token, provider)
    if not sns_id:
        raise Rejected("SOCIAL_TOKEN_EXPIRED", "access token expired, please try again")

    try:
        if not store.exists(phone_number):
            raise _not_verified()

        owner = User.objects.find_by_phone_or_sns_id(phone_number, provider, sns_id)
        if owner and owner.phone_number == phone_number:
            raise _phone_taken(owner)
        if owner:
            raise _already_registered()

        user = _create_and_consume(
            store,
            phone_number,
            email=email or None,
            name=name,
            gender=gender,
            provider=provider,
            sns_id=sns_id,
            device_token=device_token or None,
        )
    except IntegrityError as e:
        raise _from_integrity_error(e, phone_number, provider=provider, sns_id=sns_id)
    except (DatabaseError, RedisError) as e:
        raise Unexpected(e)

    logger.info("%s signup user=%s", provider, user.id)
    return issue_session_token(user, auto_login)


def login(request, *, login_id: str, password: str, auto_login: bool = False) -> str:
    try:
        user = authenticate(request, login_id=login_id, password=password)
    except DatabaseError as e:
        raise Unexpected(e)

    if user is None:
        raise Rejected("INVALID_CREDENTIALS", "id or password does not match")

    return issue_session_token(user, auto_login)
