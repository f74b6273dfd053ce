"""
Keycloak Admin API client for realm resources.

This module provides the RealmClient protocol consumed by the realm
controller and its Admin REST API implementation. The client:
- Sends a pre-issued bearer token with every request
- Serializes records with camelCase aliases and without unset fields
- Validates responses into Realm records
- Maps HTTP failures onto the provider error taxonomy (404 -> NotFoundError,
  409 -> ConflictError, everything else -> KeycloakAdminError)
"""

import logging
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import quote, unquote

import httpx

from ..constants import (
    ADMIN_API_PREFIX,
    MASTER_REALM,
    PAYLOAD_PREVIEW_LIMIT,
    REALMS_ENDPOINT,
)
from ..errors import (
    ConfigurationError,
    ConflictError,
    KeycloakAdminError,
    NotFoundError,
    ValidationError,
)
from ..models.realm import Realm

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)


class RealmClient(Protocol):
    """Remote operations the realm controller depends on."""

    def get_realm(self, realm_id: str) -> Realm: ...

    def create_realm(self, realm: Realm) -> Realm: ...

    def update_realm(self, realm: Realm) -> None: ...

    def delete_realm(self, realm_id: str) -> None: ...


class KeycloakAdminClient:
    """
    Client for realm operations on the Keycloak Admin REST API.

    Realms are addressed by the identity returned in the ``Location`` header
    when they are created, which Keycloak derives from the realm name.
    """

    def __init__(
        self,
        server_url: str,
        token: str,
        verify_ssl: bool = True,
        timeout: float = 60.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize Keycloak Admin client.

        Args:
            server_url: Base URL of the Keycloak server
            token: Bearer token accepted by the Admin API
            verify_ssl: Whether to verify SSL certificates
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.server_url = server_url.rstrip("/")
        self.token = token
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

        logger.info(f"Initialized Keycloak Admin client for {self.server_url}")

    def _get_client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=f"{self.server_url}/{ADMIN_API_PREFIX}/",
                verify=self.verify_ssl,
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json",
                },
                follow_redirects=False,
                transport=self._transport,
            )
            logger.debug(f"Created httpx client for {self.server_url}")
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "KeycloakAdminClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _make_request(
        self,
        method: str,
        endpoint: str,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Make an authenticated request to the Keycloak Admin API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint relative to the admin base URL
            json: JSON request body

        Returns:
            Response object with body already buffered

        Raises:
            NotFoundError: On HTTP 404
            ConflictError: On HTTP 409
            KeycloakAdminError: On any other API or connection failure
        """
        client = self._get_client()

        try:
            response = client.request(method, endpoint, json=json)
            response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            response_body = e.response.text or "<no content>"

            if status_code == 404:
                raise NotFoundError(f"{method} {endpoint}: not found", cause=e) from e
            if status_code == 409:
                raise ConflictError(f"{method} {endpoint}: {response_body}") from e

            error = KeycloakAdminError(
                f"API request failed: {e}",
                status_code=status_code,
                response_body=response_body,
                cause=e,
            )
            logger.error(
                f"Request failed: {method} {endpoint} - {e}",
                extra={
                    "http_status": status_code,
                    "response_body": error.body_preview(limit=1024),
                },
            )
            raise error from e

        except httpx.HTTPError as e:
            # Connection errors, timeouts and the like
            logger.error(f"Request failed: {method} {endpoint} - {e}")
            raise KeycloakAdminError(f"API request failed: {e}", cause=e) from e

    @staticmethod
    def _realm_path(realm_id: str) -> str:
        return f"{REALMS_ENDPOINT}/{quote(realm_id, safe='')}"

    # Realm Management Methods

    def get_realm(self, realm_id: str) -> Realm:
        """
        Get realm configuration from Keycloak.

        Args:
            realm_id: Identity of the realm

        Returns:
            Realm record carrying ``realm_id`` as its identity

        Raises:
            NotFoundError: If the realm does not exist
            KeycloakAdminError: If the request fails
        """
        response = self._make_request("GET", self._realm_path(realm_id))
        return Realm.from_api(response.json(), realm_id)

    def create_realm(self, realm: Realm) -> Realm:
        """
        Create a new realm in Keycloak.

        Args:
            realm: Realm record without identity

        Returns:
            The record with the identity assigned by Keycloak

        Raises:
            ConflictError: If a realm with the same name already exists
            KeycloakAdminError: If realm creation fails
        """
        payload = realm.to_api_payload()
        logger.info(
            f"Creating realm: {realm.realm}",
            extra={
                "realm_name": realm.realm,
                "payload_preview": _preview(payload),
            },
        )

        response = self._make_request("POST", REALMS_ENDPOINT, json=payload)

        if response.status_code != 201:
            raise KeycloakAdminError(
                f"Failed to create realm: {response.status_code}",
                status_code=response.status_code,
                response_body=response.text,
            )

        realm_id = _identity_from_location(response.headers.get("Location"))
        if realm_id is None:
            realm_id = realm.realm

        logger.info(f"Realm {realm.realm} created with identity {realm_id}")
        return realm.model_copy(update={"id": realm_id})

    def update_realm(self, realm: Realm) -> None:
        """
        Replace the configuration of an existing realm.

        Args:
            realm: Full realm record including its identity

        Raises:
            ValidationError: If the record has no identity
            ConflictError: If the record would rename the realm
            NotFoundError: If the realm does not exist
            KeycloakAdminError: If realm update fails
        """
        if not realm.id:
            raise ValidationError("identity is required for update", field="id")
        if realm.realm != realm.id:
            # PUT with a different name renames the realm in place
            raise ConflictError(
                f"Cannot change realm name from {realm.id!r} to {realm.realm!r}",
                field="realm",
            )

        logger.info(f"Updating realm: {realm.id}")
        self._make_request(
            "PUT", self._realm_path(realm.id), json=realm.to_api_payload()
        )

    def delete_realm(self, realm_id: str) -> None:
        """
        Delete a realm from Keycloak.

        Args:
            realm_id: Identity of the realm

        Raises:
            ValidationError: When asked to delete the master realm
            NotFoundError: If the realm does not exist
            KeycloakAdminError: If deletion fails
        """
        if realm_id == MASTER_REALM:
            raise ValidationError("Cannot delete the master realm", field="realm")

        logger.info(f"Deleting realm '{realm_id}'")
        self._make_request("DELETE", self._realm_path(realm_id))


def _identity_from_location(location: str | None) -> str | None:
    if not location:
        return None
    segment = location.rstrip("/").rsplit("/", 1)[-1]
    return unquote(segment) or None


def _preview(payload: dict[str, Any]) -> str:
    # SMTP settings may hold a password
    redacted = dict(payload)
    if "smtpServer" in redacted:
        redacted["smtpServer"] = "<redacted>"
    text = str(redacted)
    if len(text) <= PAYLOAD_PREVIEW_LIMIT:
        return text
    return f"{text[:PAYLOAD_PREVIEW_LIMIT]}...<truncated>"


def get_keycloak_admin_client(settings: "Settings") -> KeycloakAdminClient:
    """
    Create a KeycloakAdminClient from provider settings.

    Raises:
        ConfigurationError: If no admin token is configured
    """
    if not settings.keycloak_admin_token:
        raise ConfigurationError(
            "No Keycloak admin token configured",
            user_action="Set KEYCLOAK_ADMIN_TOKEN to a valid Admin API bearer token",
        )

    return KeycloakAdminClient(
        server_url=settings.keycloak_url,
        token=settings.keycloak_admin_token,
        verify_ssl=settings.keycloak_verify_ssl,
        timeout=settings.keycloak_request_timeout,
    )
