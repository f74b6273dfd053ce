"""
Data models for the realm provider.

- Realm: the domain record exchanged with the Keycloak Admin API
- ResourceDocument: the configuration document with presence tracking
"""

from .document import ResourceDocument
from .realm import Realm, SslRequired

__all__ = [
    "Realm",
    "ResourceDocument",
    "SslRequired",
]
