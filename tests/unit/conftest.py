"""Shared pytest fixtures for realm provider unit tests."""

from unittest.mock import MagicMock

import pytest

from keycloak_realm_provider.services.realm_controller import RealmController
from tests.fixtures.realm_resources import InMemoryRealmClient


@pytest.fixture
def remote() -> InMemoryRealmClient:
    """In-memory Keycloak stand-in."""
    return InMemoryRealmClient()


@pytest.fixture
def controller(remote: InMemoryRealmClient) -> RealmController:
    """RealmController wired to the in-memory remote, metrics disabled."""
    realm_controller = RealmController(remote)
    realm_controller.logger = MagicMock()
    return realm_controller
