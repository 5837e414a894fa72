"""Observability – structured logging helpers."""
from mp_faulttolerance.observability.logging.factory import JsonLoggerFactory
from mp_faulttolerance.observability.logging.logger import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
