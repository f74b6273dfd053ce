"""
Constants used throughout the realm provider.

This module defines:
- Resource type names used in logs and metrics
- Accepted values and defaults for realm fields
- Keycloak Admin API paths
"""

# Resource type identifiers
RESOURCE_TYPE_REALM = "realm"

# Identity field carried by every configuration document
ID_FIELD = "id"

# SSL requirement modes accepted by Keycloak
SSL_REQUIRED_ALL = "ALL"
SSL_REQUIRED_EXTERNAL = "EXTERNAL"
SSL_REQUIRED_NONE = "NONE"
SSL_REQUIRED_VALUES = (SSL_REQUIRED_ALL, SSL_REQUIRED_EXTERNAL, SSL_REQUIRED_NONE)
DEFAULT_SSL_REQUIRED = SSL_REQUIRED_EXTERNAL

# Admin API
ADMIN_API_PREFIX = "admin"
REALMS_ENDPOINT = "realms"
MASTER_REALM = "master"

# Operation names reported in logs, metrics and error context
OPERATION_CREATE = "create"
OPERATION_READ = "read"
OPERATION_UPDATE = "update"
OPERATION_DELETE = "delete"
OPERATION_IMPORT = "import"

# Logging previews
PAYLOAD_PREVIEW_LIMIT = 2048
