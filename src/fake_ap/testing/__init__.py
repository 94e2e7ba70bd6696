"""Testing support – clock factory and pytest fixtures.

Installing ``fake-ap`` registers the fixtures through the ``pytest11`` entry
point. Without an installed distribution, enable them in ``conftest.py``::

    pytest_plugins = ["fake_ap.testing.fixtures"]
"""

from fake_ap.testing.clock import FakeClock

__all__ = ["FakeClock"]
