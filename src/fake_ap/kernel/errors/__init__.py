"""Kernel error hierarchy.

Hierarchy::

    BaseError
    └── ApplicationError
        └── ConfigError                  (fake_ap.config.validation)
            └── MissingConfigurationError
"""

from fake_ap.kernel.errors.application import ApplicationError
from fake_ap.kernel.errors.base import BaseError

__all__ = ["ApplicationError", "BaseError"]
