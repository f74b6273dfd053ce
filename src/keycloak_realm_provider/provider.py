"""
Provider wiring for the realm controller.

Builds a RealmController from settings with every collaborator passed in
explicitly. Callers that host several providers or run tests inject their
own client and settings instead of relying on module state.
"""

import logging

from .observability.logging import setup_structured_logging
from .observability.metrics import metrics_collector
from .services.realm_controller import RealmController
from .settings import Settings
from .settings import settings as default_settings
from .utils.keycloak_admin import RealmClient, get_keycloak_admin_client

logger = logging.getLogger(__name__)


def build_realm_controller(
    settings: Settings | None = None,
    client: RealmClient | None = None,
    configure_logging: bool = True,
) -> RealmController:
    """
    Create a realm controller bound to a Keycloak Admin API client.

    Args:
        settings: Provider settings (defaults to the environment)
        client: Remote client to use instead of building one from settings
        configure_logging: Whether to install structured logging handlers

    Returns:
        RealmController ready to serve create/read/update/delete/import

    Raises:
        ConfigurationError: If no client is given and no admin token is set
    """
    settings = settings or default_settings

    if configure_logging:
        setup_structured_logging(
            log_level=settings.log_level,
            enable_json_formatting=settings.json_logs,
            correlation_id_enabled=settings.correlation_ids,
        )

    if client is None:
        client = get_keycloak_admin_client(settings)

    metrics = metrics_collector if settings.metrics_enabled else None

    logger.info(f"Realm provider configured for {settings.keycloak_url}")
    return RealmController(client, metrics=metrics)
