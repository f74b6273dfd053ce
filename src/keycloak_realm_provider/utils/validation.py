"""
Field validators for realm configuration.

Validators are pure functions over a single field value. They return
nothing on success and raise ValueError with a short message on failure;
the schema turns that into a field-qualified ValidationError before any
network call is made.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any

# Characters Keycloak cannot route in a realm path segment
INVALID_REALM_NAME_CHARS = ("/", "\\", "?", "#", "%", "&", "=", "+", " ")
MAX_REALM_NAME_LENGTH = 255


def one_of(allowed: Iterable[str]) -> Callable[[Any], None]:
    """Build a validator accepting only the given values."""
    allowed_values = tuple(allowed)

    def validate(value: Any) -> None:
        if value not in allowed_values:
            raise ValueError(
                f"Invalid value {value!r}. Valid are {', '.join(allowed_values)}"
            )

    return validate


def validate_non_negative(value: Any) -> None:
    if value < 0:
        raise ValueError("Value must be non-negative")


def validate_realm_name(value: Any) -> None:
    """
    Validate a realm name for use as a natural key.

    Raises:
        ValueError: If the name is empty, too long or not path-safe
    """
    if not value:
        raise ValueError("Realm name must be a non-empty string")
    if len(value) > MAX_REALM_NAME_LENGTH:
        raise ValueError(
            f"Realm name must be {MAX_REALM_NAME_LENGTH} characters or less"
        )
    for char in INVALID_REALM_NAME_CHARS:
        if char in value:
            raise ValueError(f"Realm name contains invalid character: {char!r}")


def validate_unique_items(value: Any) -> None:
    seen: set[str] = set()
    for item in value:
        if item in seen:
            raise ValueError(f"Duplicate entry {item!r}")
        seen.add(item)


def validate_string_map(value: Mapping[str, Any]) -> None:
    for key, item in value.items():
        if not key:
            raise ValueError("Map keys must be non-empty")
        if not isinstance(item, str):
            raise ValueError(f"Value for {key!r} must be a string")
