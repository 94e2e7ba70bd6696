"""DOM – in-memory document and location used by the fake API."""
from fake_ap.dom.document import READY_STATES, Document, Element
from fake_ap.dom.location import Location

__all__ = ["Document", "Element", "Location", "READY_STATES"]
