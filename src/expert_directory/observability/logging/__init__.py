"""Observability – structlog configuration and helpers."""
from expert_directory.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from expert_directory.observability.logging.factory import JsonLoggerFactory
from expert_directory.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
