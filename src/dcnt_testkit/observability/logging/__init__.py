"""Observability – structured logging helpers."""
from dcnt_testkit.observability.logging.factory import JsonLoggerFactory, configure_logging
from dcnt_testkit.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "configure_logging", "get_logger"]
