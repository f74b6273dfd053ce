"""
Schema descriptor for the realm resource.

Field names are the snake_cased names stored in existing state and must not
change. The record attribute of every field matches its name on the Realm
model.
"""

from ..constants import DEFAULT_SSL_REQUIRED, RESOURCE_TYPE_REALM, SSL_REQUIRED_VALUES
from ..utils.validation import (
    one_of,
    validate_non_negative,
    validate_realm_name,
    validate_string_map,
    validate_unique_items,
)
from .fields import FieldKind, FieldSchema, ResourceSchema


def _optional_bool(name: str, description: str) -> FieldSchema:
    return FieldSchema(name=name, kind=FieldKind.BOOL, description=description)


def _optional_int(name: str, description: str) -> FieldSchema:
    return FieldSchema(
        name=name,
        kind=FieldKind.INT,
        validator=validate_non_negative,
        description=description,
    )


REALM_SCHEMA = ResourceSchema(
    RESOURCE_TYPE_REALM,
    [
        FieldSchema(
            name="realm",
            kind=FieldKind.STRING,
            required=True,
            force_new=True,
            validator=validate_realm_name,
            description="Realm name and natural key",
        ),
        FieldSchema(
            name="enabled",
            kind=FieldKind.BOOL,
            required=True,
            description="Whether the realm is enabled",
        ),
        FieldSchema(
            name="ssl_required",
            kind=FieldKind.STRING,
            default=DEFAULT_SSL_REQUIRED,
            validator=one_of(SSL_REQUIRED_VALUES),
            description="SSL requirement: ALL, EXTERNAL or NONE",
        ),
        FieldSchema(
            name="display_name",
            kind=FieldKind.STRING,
            description="Human-readable display name",
        ),
        FieldSchema(
            name="supported_locales",
            kind=FieldKind.LIST,
            validator=validate_unique_items,
            description="Supported locales",
        ),
        FieldSchema(
            name="default_roles",
            kind=FieldKind.LIST,
            validator=validate_unique_items,
            description="Roles granted to new users",
        ),
        FieldSchema(
            name="smtp_server",
            kind=FieldKind.MAP,
            validator=validate_string_map,
            description="SMTP server settings",
        ),
        # Login and registration behaviour
        _optional_bool("internationalization_enabled", "Enable internationalization"),
        _optional_bool("registration_allowed", "Allow user registration"),
        _optional_bool(
            "registration_email_as_username", "Use email as username on registration"
        ),
        _optional_bool("remember_me", "Show the remember me option"),
        _optional_bool("verify_email", "Require email verification"),
        _optional_bool("reset_password_allowed", "Allow password reset"),
        _optional_bool("edit_username_allowed", "Allow users to edit their username"),
        _optional_bool("brute_force_protected", "Enable brute force detection"),
        # Token and session lifespans
        _optional_int("access_token_lifespan", "Access token lifespan in seconds"),
        _optional_int(
            "access_token_lifespan_for_implicit_flow",
            "Access token lifespan for the implicit flow in seconds",
        ),
        _optional_int("sso_session_idle_timeout", "SSO session idle timeout in seconds"),
        _optional_int("sso_session_max_lifespan", "SSO session max lifespan in seconds"),
        _optional_int(
            "offline_session_idle_timeout", "Offline session idle timeout in seconds"
        ),
        _optional_int("access_code_lifespan", "Access code lifespan in seconds"),
        _optional_int(
            "access_code_lifespan_user_action",
            "Lifespan of user action codes in seconds",
        ),
        _optional_int(
            "access_code_lifespan_login", "Lifespan of login action codes in seconds"
        ),
        # Brute force detection tuning
        _optional_int("max_failure_wait_seconds", "Max lockout wait in seconds"),
        _optional_int(
            "minimum_quick_login_wait_seconds", "Lockout after quick login failure"
        ),
        _optional_int("wait_increment_seconds", "Lockout increment per failure"),
        _optional_int(
            "quick_login_check_milli_seconds",
            "Window in milliseconds for quick login failures",
        ),
        _optional_int(
            "max_delta_time_seconds", "Time in seconds before failures reset"
        ),
        _optional_int("failure_factor", "Failures before a lockout"),
    ],
)
