import pytest

from podio_client.clients.contacts import ContactAPI
from podio_client.contracts import profile_fields as fields
from podio_client.contracts.contacts import ProfileShort
from podio_client.contracts.profile_type import ProfileType
from podio_client.contracts.users import UserMini
from podio_client.errors import NotFound, ResponseValidationError


@pytest.fixture
def api(resource):
    return ContactAPI(resource)


def test_get_contact(api, service):
    service.respond("GET", "/contact/11/v2", json_body={"profile_id": 11, "name": "Ann"})

    profile = api.get_contact(11)

    assert profile.profile_id == 11
    assert profile.name == "Ann"


def test_get_contact_missing(api, service):
    service.respond("GET", "/contact/99/v2", 404, {"error": "not_found"})

    with pytest.raises(NotFound):
        api.get_contact(99)


def test_get_contact_field(api, service):
    service.respond("GET", "/contact/11/mail/v2", json_body=["a@example.com", "b@example.com"])

    assert api.get_contact_field(11, fields.MAIL) == ["a@example.com", "b@example.com"]


def test_get_contacts_sends_type_discriminator(api, service):
    service.respond(
        "GET",
        "/contact/",
        json_body=[{"user_id": 1, "name": "Ann"}, {"user_id": 2, "name": "Bo"}],
    )

    contacts = api.get_contacts(ProfileType.MINI, limit=2)

    assert service.last.url.params["type"] == "mini"
    assert service.last.url.params["limit"] == "2"
    assert "offset" not in service.last.url.params
    assert all(isinstance(c, UserMini) for c in contacts)
    assert [c.name for c in contacts] == ["Ann", "Bo"]


def test_get_contacts_short_projection(api, service):
    service.respond("GET", "/contact/", json_body=[{"profile_id": 5, "title": ["CEO"]}])

    contacts = api.get_contacts(ProfileType.SHORT)

    assert isinstance(contacts[0], ProfileShort)
    assert contacts[0].title == ["CEO"]


def test_get_contacts_shape_mismatch(api, service):
    service.respond("GET", "/contact/", json_body=[{"name": "no id"}])

    with pytest.raises(ResponseValidationError):
        api.get_contacts(ProfileType.FULL)
