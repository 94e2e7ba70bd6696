"""Observability – logging for the fake bridge API."""
from fake_ap.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
