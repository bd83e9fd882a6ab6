"""
Observability module.

Provides logging setup, correlation ID tracking and request logging.
"""

from budhhub.observability.correlation import get_correlation_id, set_correlation_id
from budhhub.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
