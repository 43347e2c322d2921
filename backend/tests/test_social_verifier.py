from unittest.mock import MagicMock

import requests

from app.authentication.social import SocialTokenVerifier


def _session(status=200, body=None, exc=None):
    session = MagicMock(spec=requests.Session)
    if exc:
        session.get.side_effect = exc
    else:
        response = MagicMock()
        response.status_code = status
        response.json.return_value = {} if body is None else body
        session.get.return_value = response
    return session


def test_naver_subject_id():
    session = _session(body={"resultcode": "00", "response": {"id": "naver-abc"}})

    sns_id = SocialTokenVerifier(session=session, timeout=1).exchange("tok", "naver")

    assert sns_id == "naver-abc"
    _, kwargs = session.get.call_args
    assert kwargs["headers"] == {"Authorization": "Bearer tok"}
    assert kwargs["timeout"] == 1


def test_kakao_numeric_id_is_stringified():
    session = _session(body={"id": 123456})

    assert SocialTokenVerifier(session=session, timeout=1).exchange("tok", "kakao") == "123456"


def test_expired_token_returns_none():
    session = _session(status=401)

    assert SocialTokenVerifier(session=session, timeout=1).exchange("tok", "kakao") is None


def test_network_error_returns_none():
    session = _session(exc=requests.ConnectionError("down"))

    assert SocialTokenVerifier(session=session, timeout=1).exchange("tok", "naver") is None


def test_kakao_non_object_body_returns_none():
    session = _session(body=[])

    assert SocialTokenVerifier(session=session, timeout=1).exchange("tok", "kakao") is None


def test_naver_non_object_response_returns_none():
    session = _session(body={"resultcode": "00", "response": "x"})

    assert SocialTokenVerifier(session=session, timeout=1).exchange("tok", "naver") is None
