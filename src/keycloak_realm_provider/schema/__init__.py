"""
Declarative resource schemas.

The schema is configuration data: it names every field of a resource
together with its kind, requiredness, default, force-replace flag and
validator.
"""

from .fields import FieldKind, FieldSchema, ResourceSchema
from .realm import REALM_SCHEMA

__all__ = [
    "FieldKind",
    "FieldSchema",
    "ResourceSchema",
    "REALM_SCHEMA",
]
