"""
Observability module.

Provides logging configuration, correlation ID tracking and request middleware.
"""

from agrideck.observability.logger import configure_logging

__all__ = ["configure_logging"]
