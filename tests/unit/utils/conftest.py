"""Shared pytest fixtures for Keycloak admin client tests."""

import json

import httpx
import pytest

from keycloak_realm_provider.utils.keycloak_admin import KeycloakAdminClient


class RecordingHandler:
    """httpx.MockTransport handler returning queued responses in order."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response | Exception] = []

    def queue(self, status_code: int, json_data=None, headers=None, text=None):
        if json_data is not None:
            response = httpx.Response(status_code, json=json_data, headers=headers)
        else:
            response = httpx.Response(status_code, text=text or "", headers=headers)
        self.responses.append(response)

    def fail(self, error: Exception):
        self.responses.append(error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def admin_client(handler: RecordingHandler):
    """KeycloakAdminClient talking to a mock transport."""
    client = KeycloakAdminClient(
        server_url="http://keycloak:8080/",
        token="test-token",
        transport=httpx.MockTransport(handler),
    )
    yield client
    client.close()
