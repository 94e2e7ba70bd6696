"""Observability – structured logging helpers."""
from fake_ap.observability.logging.factory import configure_logging, get_logger
from fake_ap.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "configure_logging", "get_logger"]
