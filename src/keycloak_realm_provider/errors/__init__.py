"""
Error handling module for the realm provider.

This module provides the error taxonomy shared by the codec, the controller
and the remote client.
"""

from .provider_errors import (
    ConfigurationError,
    ConflictError,
    KeycloakAdminError,
    NotFoundError,
    ProviderError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ProviderError",
    "ValidationError",
    "NotFoundError",
    "TransportError",
    "ConflictError",
    "KeycloakAdminError",
    "ConfigurationError",
]
