"""
Provider error hierarchy with categorization and operation context.

This module defines the error types raised by the realm provider. The
controller attaches the failing operation and resource identity to these
errors and re-raises them unchanged, so callers can report a useful message
without the engine wrapping or swallowing anything.
"""


class ProviderError(Exception):
    """
    Base error class for all provider-related exceptions.

    Provides categorization, retry hints for the caller, user guidance and
    the operation context in which the error was raised.
    """

    def __init__(
        self,
        message: str,
        category: str,
        retryable: bool = False,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize provider error.

        Args:
            message: Human-readable error description
            category: Error category (validation, not_found, transport, conflict)
            retryable: Whether the caller may retry the operation
            user_action: What the user should do to resolve the issue
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.category = category
        self.retryable = retryable
        self.user_action = user_action
        self.cause = cause
        self.operation: str | None = None
        self.resource_id: str | None = None

    def with_context(
        self, operation: str, resource_id: str | None = None
    ) -> "ProviderError":
        """Attach operation context, keeping any context set closer to the failure."""
        if self.operation is None:
            self.operation = operation
        if self.resource_id is None and resource_id:
            self.resource_id = resource_id
        return self

    def __str__(self) -> str:
        """Enhanced string representation with context and user guidance."""
        base_msg = super().__str__()
        if self.operation:
            target = f" {self.resource_id}" if self.resource_id else ""
            base_msg = f"{self.operation}{target}: {base_msg}"
        if self.user_action:
            return f"{base_msg}\nAction required: {self.user_action}"
        return base_msg


class ValidationError(ProviderError):
    """Invalid field value in a configuration document."""

    def __init__(
        self, message: str, field: str | None = None, user_action: str | None = None
    ):
        action = user_action or "Check the realm configuration and fix the field"
        if field:
            message = f"Validation error in field '{field}': {message}"
        super().__init__(
            message=message, category="validation", retryable=False, user_action=action
        )
        self.field = field


class NotFoundError(ProviderError):
    """The remote resource does not exist."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(
            message=message, category="not_found", retryable=False, cause=cause
        )


class TransportError(ProviderError):
    """Network, authentication or server failure talking to the remote API."""

    def __init__(
        self,
        message: str,
        retryable: bool = True,
        user_action: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(
            message=message,
            category="transport",
            retryable=retryable,
            user_action=user_action or "Check remote API connectivity and credentials",
            cause=cause,
        )


class ConflictError(ProviderError):
    """Attempted change of an immutable field or of an existing resource."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            category="conflict",
            retryable=False,
            user_action="Recreate the resource instead of updating it in place",
        )
        self.field = field


class KeycloakAdminError(TransportError):
    """Error communicating with the Keycloak Admin API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
        cause: Exception | None = None,
    ):
        if status_code:
            message = f"HTTP {status_code}: {message}"

        # 4xx errors are client errors, retrying will not help
        retryable = not (status_code and 400 <= status_code < 500)

        super().__init__(
            message=message,
            retryable=retryable,
            user_action="Check Keycloak instance status and admin credentials",
            cause=cause,
        )
        self.status_code = status_code
        self.response_body = response_body

    def body_preview(self, limit: int = 2048) -> str | None:
        """Return a truncated preview of the response body for logging."""

        if self.response_body is None:
            return None

        if len(self.response_body) <= limit:
            return self.response_body

        return f"{self.response_body[:limit]}...<truncated>"


class ConfigurationError(ProviderError):
    """Error in provider configuration."""

    def __init__(self, message: str, user_action: str | None = None):
        super().__init__(
            message=message,
            category="configuration",
            retryable=False,
            user_action=user_action or "Review and correct provider settings",
        )
