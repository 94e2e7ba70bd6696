"""Events – the ``AP.events`` bus."""
from fake_ap.events.bus import EventBus, Listener

__all__ = ["EventBus", "Listener"]
