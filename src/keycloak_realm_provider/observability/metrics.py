"""
Prometheus metrics for the realm provider.

This module tracks the count, duration and failures of resource operations
and how often tracked state is dropped because the remote resource is gone.
"""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

logger = logging.getLogger(__name__)

# Global metrics registry
_metrics_registry: CollectorRegistry | None = None

# Metrics definitions
OPERATION_TOTAL = Counter(
    "keycloak_realm_provider_operations_total",
    "Total number of resource operations",
    ["resource_type", "operation", "result"],
    registry=None,  # Registered in get_metrics_registry
)

OPERATION_DURATION = Histogram(
    "keycloak_realm_provider_operation_duration_seconds",
    "Time spent on resource operations",
    ["resource_type", "operation"],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
    registry=None,
)

OPERATION_ERRORS = Counter(
    "keycloak_realm_provider_operation_errors_total",
    "Total number of failed resource operations",
    ["resource_type", "operation", "error_type", "retryable"],
    registry=None,
)

STATE_DROPPED_TOTAL = Counter(
    "keycloak_realm_provider_state_dropped_total",
    "Tracked resources dropped because the remote resource no longer exists",
    ["resource_type"],
    registry=None,
)


def get_metrics_registry() -> CollectorRegistry:
    """Get or create the global metrics registry."""
    global _metrics_registry

    if _metrics_registry is None:
        _metrics_registry = CollectorRegistry()

        for metric in [
            OPERATION_TOTAL,
            OPERATION_DURATION,
            OPERATION_ERRORS,
            STATE_DROPPED_TOTAL,
        ]:
            _metrics_registry.register(metric)

    return _metrics_registry


class MetricsCollector:
    """Collects and manages metrics for provider operations."""

    def __init__(self):
        self.registry = get_metrics_registry()

    @contextmanager
    def track_operation(self, resource_type: str, operation: str) -> Iterator[None]:
        """
        Context manager to track a resource operation.

        Args:
            resource_type: Type of resource being reconciled
            operation: Operation being performed
        """
        start_time = time.time()
        result = "unknown"

        try:
            yield
            result = "success"
        except Exception as e:
            result = "error"

            retryable = "true" if getattr(e, "retryable", False) else "false"

            OPERATION_ERRORS.labels(
                resource_type=resource_type,
                operation=operation,
                error_type=type(e).__name__,
                retryable=retryable,
            ).inc()

            raise
        finally:
            duration = time.time() - start_time

            OPERATION_TOTAL.labels(
                resource_type=resource_type, operation=operation, result=result
            ).inc()

            OPERATION_DURATION.labels(
                resource_type=resource_type, operation=operation
            ).observe(duration)

    def record_state_dropped(self, resource_type: str) -> None:
        STATE_DROPPED_TOTAL.labels(resource_type=resource_type).inc()

    def render(self) -> bytes:
        """Render the registry in the Prometheus text exposition format."""
        return generate_latest(self.registry)


metrics_collector = MetricsCollector()
