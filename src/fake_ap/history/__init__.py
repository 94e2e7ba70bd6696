"""History – the ``AP.history`` simulator."""
from fake_ap.history.simulator import FRAGMENT_MARKER, HistorySimulator

__all__ = ["FRAGMENT_MARKER", "HistorySimulator"]
