"""
Keycloak Realm Provider - declarative reconciliation of Keycloak realms.

This package reconciles a realm configuration document against the live
state held by the Keycloak Admin REST API:
- Schema-driven translation between documents and API payloads
- Presence tracking for optional fields (unset vs. explicit zero/false)
- Create, read, update, delete and import with force-replace handling
"""

from .models import Realm, ResourceDocument
from .provider import build_realm_controller
from .schema import REALM_SCHEMA
from .services import RealmController

__version__ = "0.1.0"

__all__ = [
    "REALM_SCHEMA",
    "Realm",
    "RealmController",
    "ResourceDocument",
    "build_realm_controller",
]
