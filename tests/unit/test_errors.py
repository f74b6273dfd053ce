"""Unit tests for the provider error hierarchy."""

from keycloak_realm_provider.errors import (
    ConflictError,
    KeycloakAdminError,
    NotFoundError,
    ProviderError,
    TransportError,
    ValidationError,
)


class TestProviderError:
    """Base error behaviour."""

    def test_str_includes_user_action(self):
        error = ProviderError("broken", category="test", user_action="fix it")
        assert str(error) == "broken\nAction required: fix it"

    def test_with_context_prefixes_message(self):
        error = NotFoundError("realm gone").with_context("read", "acme")
        assert error.operation == "read"
        assert error.resource_id == "acme"
        assert str(error) == "read acme: realm gone"

    def test_with_context_keeps_inner_context(self):
        error = NotFoundError("realm gone")
        error.with_context("import", "acme")
        error.with_context("update", "other")
        assert error.operation == "import"
        assert error.resource_id == "acme"

    def test_with_context_returns_same_instance(self):
        error = TransportError("down")
        assert error.with_context("delete") is error


class TestSubclasses:
    """Category, retry and field details per subclass."""

    def test_validation_error_names_field(self):
        error = ValidationError("must be positive", field="failure_factor")
        assert error.field == "failure_factor"
        assert error.category == "validation"
        assert not error.retryable
        assert "field 'failure_factor'" in str(error)

    def test_transport_error_retryable_by_default(self):
        assert TransportError("timeout").retryable

    def test_conflict_error(self):
        error = ConflictError("rename", field="realm")
        assert error.category == "conflict"
        assert error.field == "realm"

    def test_admin_error_is_transport_error(self):
        error = KeycloakAdminError("failed", status_code=503)
        assert isinstance(error, TransportError)
        assert error.retryable
        assert str(error).startswith("HTTP 503: failed")

    def test_admin_client_error_not_retryable(self):
        assert not KeycloakAdminError("bad request", status_code=400).retryable

    def test_body_preview_truncates(self):
        error = KeycloakAdminError("failed", status_code=500, response_body="x" * 10)
        assert error.body_preview(limit=4) == "xxxx...<truncated>"
        assert error.body_preview() == "x" * 10

    def test_body_preview_without_body(self):
        assert KeycloakAdminError("failed").body_preview() is None
