"""Kernel time – Clock port + implementations."""
from fake_ap.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
