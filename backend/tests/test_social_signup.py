import pytest

from app.users.models import Provider, User
from tests.conftest import PHONE

SOCIAL_URL = "/api/auth/signup/social"


def _payload(**overrides):
    body = {
        "phoneNumber": PHONE,
        "name": "socialer",
        "provider": "kakao",
        "accessToken": "provider-access-token",
    }
    body.update(overrides)
    return body


def _error(response):
    return response.json()["error"]


@pytest.mark.django_db
def test_social_signup_creates_user(
    api_client, verified_phone, store, social_verifier, django_capture_on_commit_callbacks
):
    with django_capture_on_commit_callbacks(execute=True):
        res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 200
    assert res.json()["data"]["token"]

    user = User.objects.get(sns_id="sns-123")
    assert user.provider == Provider.KAKAO
    assert user.login_id is None
    assert not user.has_usable_password()
    assert user.gender == 0
    assert not store.exists(PHONE)
    social_verifier.exchange.assert_called_once_with("provider-access-token", "kakao")


@pytest.mark.django_db
def test_expired_provider_token(api_client, verified_phone, social_verifier):
    social_verifier.exchange.return_value = None

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 400
    assert _error(res)["code"] == "SOCIAL_TOKEN_EXPIRED"
    assert User.objects.count() == 0


@pytest.mark.django_db
def test_token_is_checked_before_phone_verification(api_client, social_verifier):
    social_verifier.exchange.return_value = None

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert _error(res)["code"] == "SOCIAL_TOKEN_EXPIRED"


@pytest.mark.django_db
def test_social_signup_requires_verification(api_client, social_verifier):
    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 400
    assert _error(res)["code"] == "PHONE_NOT_VERIFIED"


@pytest.mark.django_db
def test_phone_match_wins_over_subject_match(
    api_client, verified_phone, make_user, social_verifier
):
    # 같은 sns_id 계정(번호 다름)과 같은 번호 계정(로컬)이 모두 있음
    make_user(
        provider=Provider.KAKAO, sns_id="sns-123", phone_number="01099998888"
    )
    make_user(login_id="owner01")

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 400
    assert _error(res)["code"] == "PHONE_ALREADY_USED"
    assert _error(res)["message"] == "an account with the same phone number already exists"


@pytest.mark.django_db
def test_phone_owned_by_other_provider(
    api_client, verified_phone, make_user, social_verifier
):
    make_user(provider=Provider.NAVER, sns_id="n-9")

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert _error(res)["code"] == "PHONE_ALREADY_USED"
    assert "naver" in _error(res)["message"]


@pytest.mark.django_db
def test_subject_already_registered(
    api_client, verified_phone, make_user, social_verifier
):
    make_user(provider=Provider.KAKAO, sns_id="sns-123", phone_number="01099998888")

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 400
    assert _error(res)["code"] == "ALREADY_REGISTERED"


@pytest.mark.django_db
def test_same_subject_on_other_provider_is_allowed(
    api_client, verified_phone, make_user, social_verifier
):
    make_user(provider=Provider.NAVER, sns_id="sns-123", phone_number="01099998888")

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 200


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"provider": "google"}, "provider must be naver or kakao"),
        ({"accessToken": ""}, "accessToken does not exist"),
        ({"gender": 5}, "gender format is invalid"),
        ({"autoLogin": 1}, "autoLogin format is invalid"),
    ],
)
@pytest.mark.django_db
def test_social_validation(api_client, social_verifier, overrides, message):
    res = api_client.post(SOCIAL_URL, _payload(**overrides), format="json")

    assert _error(res) == {"code": "VALIDATION_ERROR", "message": message}
    social_verifier.exchange.assert_not_called()


@pytest.mark.django_db
def test_malformed_provider_profile_is_treated_as_expired(
    api_client, verified_phone, monkeypatch
):
    from unittest.mock import MagicMock

    import requests

    from app.authentication.social import SocialTokenVerifier

    # 200 이지만 kakao 가 객체가 아닌 본문을 돌려준 경우
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = []
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    monkeypatch.setattr(
        "app.authentication.services.SocialTokenVerifier",
        lambda: SocialTokenVerifier(session=session, timeout=1),
    )

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 400
    assert res.json()["success"] is False
    assert _error(res)["code"] == "SOCIAL_TOKEN_EXPIRED"
    assert User.objects.count() == 0


@pytest.mark.django_db
def test_unknown_failure_is_rendered_as_unexpected(
    api_client, verified_phone, social_verifier
):
    social_verifier.exchange.side_effect = AttributeError("boom")

    res = api_client.post(SOCIAL_URL, _payload(), format="json")

    assert res.status_code == 409
    assert res.json() == {
        "success": False,
        "data": None,
        "error": {"code": "UNEXPECTED_ERROR", "message": "unexpected error occurred"},
    }
    assert User.objects.count() == 0


@pytest.mark.django_db
def test_concurrent_duplicate_subject_maps_constraint_to_same_reason(
    verified_phone, store, make_user, monkeypatch
):
    from unittest.mock import MagicMock

    from app.authentication.services import register_social
    from app.authentication.social import SocialTokenVerifier
    from app.common.exceptions import Rejected

    make_user(provider=Provider.KAKAO, sns_id="sns-123", phone_number="01099998888")

    # 사전 조회 시점에는 아직 없던 계정
    monkeypatch.setattr(
        User.objects, "find_by_phone_or_sns_id", lambda *args: None
    )
    verifier = MagicMock(spec=SocialTokenVerifier)
    verifier.exchange.return_value = "sns-123"

    with pytest.raises(Rejected) as exc:
        register_social(
            provider="kakao",
            access_token="tok",
            phone_number=PHONE,
            name="socialer",
            store=store,
            verifier=verifier,
        )

    assert exc.value.error_code == "ALREADY_REGISTERED"
    assert User.objects.count() == 1
    assert store.exists(PHONE)
