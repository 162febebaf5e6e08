"""Pytest fixtures: a fake Podio service behind httpx.MockTransport."""

import json

import httpx
import pytest

from podio_client.transport import ResourceClient

BASE_URL = "https://api.podio.test"


class FakePodioService:
    """Records every request and answers from canned (method, path) responses.

    Unregistered routes answer 204 with no body, like the service does for
    successful PUT/DELETE calls.
    """

    def __init__(self):
        self.requests = []
        self._responses = {}

    def respond(self, method, path, status_code=200, json_body=None, text=None):
        self._responses[(method, path)] = (status_code, json_body, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, json_body, text = self._responses.get((request.method, request.url.path), (204, None, None))
        if json_body is not None:
            return httpx.Response(status_code, json=json_body)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def service():
    return FakePodioService()


@pytest.fixture
def http_client(service):
    client = httpx.Client(transport=httpx.MockTransport(service.handler))
    yield client
    client.close()


@pytest.fixture
def resource(http_client):
    return ResourceClient(base_url=BASE_URL, access_token="token-123", http_client=http_client)
