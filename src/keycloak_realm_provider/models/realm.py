"""
Pydantic model for the Keycloak realm record.

The Realm model is the canonical representation exchanged with the Admin
API. Snake_cased attributes carry camelCase aliases so the same model
validates API responses and serializes request payloads. Optional
attributes default to None, which means "not configured": they are left out
of payloads so Keycloak applies its own defaults.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_SSL_REQUIRED

SslRequired = Literal["ALL", "EXTERNAL", "NONE"]


class Realm(BaseModel):
    """Keycloak realm configuration record."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    # Identity
    id: str | None = Field(
        None, description="Identity assigned by Keycloak when the realm is created"
    )
    realm: str = Field(..., description="Realm name, fixed at creation time")

    # Required and defaulted scalars
    enabled: bool = Field(..., description="Whether the realm is enabled")
    ssl_required: SslRequired = Field(
        DEFAULT_SSL_REQUIRED,
        alias="sslRequired",
        description="SSL requirement for requests to the realm",
    )

    # Optional scalars and collections
    display_name: str | None = Field(
        None, alias="displayName", description="Human-readable display name"
    )
    supported_locales: list[str] | None = Field(
        None, alias="supportedLocales", description="Supported locales"
    )
    default_roles: list[str] | None = Field(
        None, alias="defaultRoles", description="Roles granted to new users"
    )
    smtp_server: dict[str, str] | None = Field(
        None, alias="smtpServer", description="SMTP server settings"
    )

    # Login and registration behaviour
    internationalization_enabled: bool | None = Field(
        None, alias="internationalizationEnabled"
    )
    registration_allowed: bool | None = Field(None, alias="registrationAllowed")
    registration_email_as_username: bool | None = Field(
        None, alias="registrationEmailAsUsername"
    )
    remember_me: bool | None = Field(None, alias="rememberMe")
    verify_email: bool | None = Field(None, alias="verifyEmail")
    reset_password_allowed: bool | None = Field(None, alias="resetPasswordAllowed")
    edit_username_allowed: bool | None = Field(None, alias="editUsernameAllowed")
    brute_force_protected: bool | None = Field(None, alias="bruteForceProtected")

    # Token and session lifespans (seconds)
    access_token_lifespan: int | None = Field(None, alias="accessTokenLifespan")
    access_token_lifespan_for_implicit_flow: int | None = Field(
        None, alias="accessTokenLifespanForImplicitFlow"
    )
    sso_session_idle_timeout: int | None = Field(None, alias="ssoSessionIdleTimeout")
    sso_session_max_lifespan: int | None = Field(None, alias="ssoSessionMaxLifespan")
    offline_session_idle_timeout: int | None = Field(
        None, alias="offlineSessionIdleTimeout"
    )
    access_code_lifespan: int | None = Field(None, alias="accessCodeLifespan")
    access_code_lifespan_user_action: int | None = Field(
        None, alias="accessCodeLifespanUserAction"
    )
    access_code_lifespan_login: int | None = Field(
        None, alias="accessCodeLifespanLogin"
    )

    # Brute force detection tuning
    max_failure_wait_seconds: int | None = Field(None, alias="maxFailureWaitSeconds")
    minimum_quick_login_wait_seconds: int | None = Field(
        None, alias="minimumQuickLoginWaitSeconds"
    )
    wait_increment_seconds: int | None = Field(None, alias="waitIncrementSeconds")
    quick_login_check_milli_seconds: int | None = Field(
        None, alias="quickLoginCheckMilliSeconds"
    )
    max_delta_time_seconds: int | None = Field(None, alias="maxDeltaTimeSeconds")
    failure_factor: int | None = Field(None, alias="failureFactor")

    @field_validator("ssl_required", mode="before")
    @classmethod
    def normalize_ssl_required(cls, v):
        # Keycloak reports the mode in lowercase
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("realm")
    @classmethod
    def validate_realm_name(cls, v):
        if not v or not isinstance(v, str):
            raise ValueError("Realm name must be a non-empty string")
        return v

    def to_api_payload(self) -> dict[str, Any]:
        """
        Convert the record to Keycloak Admin API format.

        The identity is carried in the request path, and unset optional
        fields are omitted so Keycloak keeps its own values for them.

        Returns:
            Dictionary in Keycloak Admin API format
        """
        return self.model_dump(exclude_none=True, by_alias=True, exclude={"id"})

    @classmethod
    def from_api(cls, data: dict[str, Any], realm_id: str) -> "Realm":
        """
        Build a record from an Admin API realm representation.

        Keycloak addresses realms by the identity used in the request path,
        so that identity replaces the internal id of the representation.
        """
        realm = cls.model_validate(data)
        return realm.model_copy(update={"id": realm_id})
