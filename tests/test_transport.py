import httpx
import pytest

from podio_client.client import PodioClient
from podio_client.config import ClientConfig
from podio_client.contracts.users import User
from podio_client.errors import (
    BadRequest,
    Conflict,
    Forbidden,
    NotFound,
    RateLimited,
    RemoteError,
    ResponseValidationError,
    ServerError,
    Unauthorized,
    error_for_status,
)
from podio_client.transport import ResourceClient


def test_requests_carry_json_and_auth_headers(resource, service):
    resource.put("/user/property/x", {"value": True})

    headers = service.last.headers
    assert str(service.last.url) == "https://api.podio.test/user/property/x"
    assert headers["Accept"] == "application/json"
    assert headers["Content-Type"] == "application/json"
    assert headers["Authorization"] == "OAuth2 token-123"


def test_empty_success_body_returns_none(resource, service):
    assert resource.delete("/user/property/x") is None


def test_get_validates_into_model(resource, service):
    service.respond("GET", "/user/", json_body={"user_id": 1, "extra": "ignored"})

    user = resource.get("/user/", User)

    assert user.user_id == 1


def test_get_with_mismatched_shape_raises_validation_error(resource, service):
    service.respond("GET", "/user/", json_body={"mail": "no-id@example.com"})

    with pytest.raises(ResponseValidationError) as exc_info:
        resource.get("/user/", User)

    assert exc_info.value.payload == {"mail": "no-id@example.com"}


def test_non_json_error_body_is_kept(resource, service):
    service.respond("GET", "/user/", 502, text="Bad gateway")

    with pytest.raises(ServerError) as exc_info:
        resource.get("/user/")

    assert exc_info.value.body == "Bad gateway"
    assert exc_info.value.error is None
    assert "502" in str(exc_info.value)


def test_transport_errors_propagate_unchanged():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    resource = ResourceClient(base_url="https://api.podio.test", http_client=client)

    with pytest.raises(httpx.ConnectError):
        resource.get("/user/")


@pytest.mark.parametrize(
    "status_code, error_type",
    [
        (400, BadRequest),
        (401, Unauthorized),
        (403, Forbidden),
        (404, NotFound),
        (409, Conflict),
        (420, RateLimited),
        (429, RateLimited),
        (500, ServerError),
        (503, ServerError),
        (418, RemoteError),
    ],
)
def test_error_for_status(status_code, error_type):
    err = error_for_status(status_code, "{}", {"error": "x", "error_description": "details"})

    assert type(err) is error_type
    assert err.status_code == status_code
    assert err.error == "x"
    assert str(err) == f"HTTP {status_code}: details"


def test_podio_client_wires_apis_to_one_transport(service, http_client):
    config = ClientConfig(api_url="https://api.podio.test/", access_token="abc")
    service.respond("GET", "/user/property/beta", json_body={"value": True})

    with PodioClient(config=config, http_client=http_client) as podio:
        assert podio.users.resource is podio.contacts.resource
        assert podio.users.get_property("beta") is True

    assert service.last.headers["Authorization"] == "OAuth2 abc"
    assert service.last.headers["User-Agent"].startswith("podio-client/")


def test_non_json_success_body_raises_validation_error(resource, service):
    service.respond("GET", "/user/", 200, text="<html>maintenance</html>")

    with pytest.raises(ResponseValidationError) as exc_info:
        resource.get("/user/", User)

    assert exc_info.value.payload == "<html>maintenance</html>"
