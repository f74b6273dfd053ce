"""
Controller for Keycloak realm resources.

Binds the generic lifecycle of BaseController to a RealmClient and the
realm schema. The client and schema are passed in explicitly; nothing is
looked up from a global registry.
"""

from ..models.realm import Realm
from ..observability.metrics import MetricsCollector
from ..schema.fields import ResourceSchema
from ..schema.realm import REALM_SCHEMA
from ..utils.keycloak_admin import RealmClient
from .base_controller import BaseController


class RealmController(BaseController[Realm]):
    """Reconciles realm configuration documents against a RealmClient."""

    def __init__(
        self,
        client: RealmClient,
        schema: ResourceSchema = REALM_SCHEMA,
        metrics: MetricsCollector | None = None,
    ) -> None:
        """
        Initialize realm controller.

        Args:
            client: Remote client for realm operations
            schema: Realm schema descriptor
            metrics: Metrics collector, or None to disable metrics
        """
        super().__init__(schema, Realm, metrics=metrics)
        self.client = client

    def remote_get(self, resource_id: str) -> Realm:
        return self.client.get_realm(resource_id)

    def remote_create(self, record: Realm) -> Realm:
        return self.client.create_realm(record)

    def remote_update(self, record: Realm) -> None:
        self.client.update_realm(record)

    def remote_delete(self, resource_id: str) -> None:
        self.client.delete_realm(resource_id)
