"""
fake_ap – a test double for the host bridge API (``AP``) of embedded add-ons.

Import path convention::

    from fake_ap import FakeAP
    from fake_ap.config import MissingConfigurationError
    from fake_ap.dispatch import NOT_IMPLEMENTED_METHODS
    from fake_ap.mount import reset_mount_registry
"""

from fake_ap.api import FakeAP

__version__ = "0.1.0"
__all__ = ["FakeAP", "__version__"]
