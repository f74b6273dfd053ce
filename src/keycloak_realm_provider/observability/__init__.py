"""
Observability for the realm provider: structured logging and metrics.
"""

from .logging import ProviderLogger, setup_structured_logging
from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "ProviderLogger",
    "metrics_collector",
    "setup_structured_logging",
]
