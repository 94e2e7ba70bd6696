"""Testing fixtures – pytest plugin for the fake bridge API."""
from fake_ap.testing.fixtures.ap import fake_ap, fake_clock, mount_registry

__all__ = ["fake_ap", "fake_clock", "mount_registry"]
