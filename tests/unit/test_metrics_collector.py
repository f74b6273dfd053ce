"""
Unit tests for MetricsCollector methods in observability/metrics.py.

Tests the individual methods of MetricsCollector to verify they call the
correct Prometheus metric objects with the correct label values.
"""

from unittest.mock import MagicMock, patch

import pytest

from keycloak_realm_provider.errors import KeycloakAdminError, NotFoundError
from keycloak_realm_provider.observability.metrics import (
    MetricsCollector,
    get_metrics_registry,
)


@pytest.fixture
def collector():
    """Create a MetricsCollector with the registry init patched out."""
    with patch(
        "keycloak_realm_provider.observability.metrics.get_metrics_registry",
        return_value=MagicMock(),
    ):
        return MetricsCollector()


class TestTrackOperation:
    """Test the per-operation context manager."""

    @patch("keycloak_realm_provider.observability.metrics.OPERATION_DURATION")
    @patch("keycloak_realm_provider.observability.metrics.OPERATION_TOTAL")
    def test_success_records_total_and_duration(
        self, mock_total, mock_duration, collector
    ):
        with collector.track_operation("realm", "create"):
            pass

        mock_total.labels.assert_called_with(
            resource_type="realm", operation="create", result="success"
        )
        mock_total.labels().inc.assert_called_once()
        mock_duration.labels.assert_called_with(resource_type="realm", operation="create")
        mock_duration.labels().observe.assert_called_once()

    @patch("keycloak_realm_provider.observability.metrics.OPERATION_ERRORS")
    @patch("keycloak_realm_provider.observability.metrics.OPERATION_DURATION")
    @patch("keycloak_realm_provider.observability.metrics.OPERATION_TOTAL")
    def test_error_records_error_and_reraises(
        self, mock_total, mock_duration, mock_errors, collector
    ):
        with pytest.raises(KeycloakAdminError):
            with collector.track_operation("realm", "read"):
                raise KeycloakAdminError("unavailable", status_code=503)

        mock_errors.labels.assert_called_with(
            resource_type="realm",
            operation="read",
            error_type="KeycloakAdminError",
            retryable="true",
        )
        mock_errors.labels().inc.assert_called_once()
        mock_total.labels.assert_called_with(
            resource_type="realm", operation="read", result="error"
        )

    @patch("keycloak_realm_provider.observability.metrics.OPERATION_ERRORS")
    @patch("keycloak_realm_provider.observability.metrics.OPERATION_DURATION")
    @patch("keycloak_realm_provider.observability.metrics.OPERATION_TOTAL")
    def test_non_retryable_error_label(
        self, mock_total, mock_duration, mock_errors, collector
    ):
        with pytest.raises(NotFoundError):
            with collector.track_operation("realm", "import"):
                raise NotFoundError("gone")

        assert mock_errors.labels.call_args.kwargs["retryable"] == "false"


class TestStateDropped:
    @patch("keycloak_realm_provider.observability.metrics.STATE_DROPPED_TOTAL")
    def test_record_state_dropped(self, mock_dropped, collector):
        collector.record_state_dropped("realm")
        mock_dropped.labels.assert_called_with(resource_type="realm")
        mock_dropped.labels().inc.assert_called_once()


class TestRegistry:
    def test_registry_is_shared(self):
        assert get_metrics_registry() is get_metrics_registry()

    def test_render_exposes_provider_metrics(self):
        output = MetricsCollector().render().decode()
        assert "keycloak_realm_provider_operations_total" in output
