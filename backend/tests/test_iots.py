import pytest

from app.iots.models import Iot
from app.iots.services import bind_device

IOT_URL = "/api/iots"


@pytest.mark.django_db
def test_bind_device(auth_client, user):
    res = auth_client.post(IOT_URL, {"iot": "IOT-0001", "name": "kitchen"}, format="json")

    assert res.status_code == 200
    assert res.json()["data"]["iot"] == "IOT-0001"
    iot = Iot.objects.get(iot_id="IOT-0001")
    assert iot.user == user
    assert iot.name == "kitchen"


@pytest.mark.django_db
def test_rebinding_moves_device_to_new_owner(make_user):
    a = make_user(login_id="owner01", phone_number="01011112222")
    b = make_user(login_id="owner02", phone_number="01033334444")

    bind_device(a, "IOT-0001", "first")
    bind_device(b, "IOT-0001", "second")

    assert Iot.objects.filter(iot_id="IOT-0001").count() == 1
    iot = Iot.objects.get(iot_id="IOT-0001")
    assert iot.user == b
    assert iot.name == "second"


@pytest.mark.django_db
def test_label_is_optional(auth_client):
    res = auth_client.post(IOT_URL, {"iot": "IOT-0002"}, format="json")

    assert res.status_code == 200
    assert Iot.objects.get(iot_id="IOT-0002").name is None


@pytest.mark.parametrize(
    "body, message",
    [
        ({"iot": ""}, "iot id is invalid"),
        ({}, "iot id is invalid"),
        ({"iot": "IOT-1", "name": "x"}, "name is invalid"),
        ({"iot": "IOT-1", "name": "x" * 11}, "name is invalid"),
    ],
)
@pytest.mark.django_db
def test_bind_validation(auth_client, body, message):
    res = auth_client.post(IOT_URL, body, format="json")

    assert res.status_code == 400
    assert res.json()["error"] == {"code": "VALIDATION_ERROR", "message": message}
    assert Iot.objects.count() == 0


@pytest.mark.django_db
def test_list_only_own_devices(auth_client, user, make_user):
    other = make_user(login_id="other01", phone_number="01055556666")
    bind_device(user, "IOT-MINE", "mine")
    bind_device(other, "IOT-THEIRS", "theirs")

    res = auth_client.get(IOT_URL)

    iots = res.json()["data"]["iots"]
    assert [i["iot"] for i in iots] == ["IOT-MINE"]


@pytest.mark.django_db
def test_requires_authentication(api_client):
    res = api_client.post(IOT_URL, {"iot": "IOT-0001"}, format="json")

    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"
