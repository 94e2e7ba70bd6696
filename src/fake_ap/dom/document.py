"""DOM – in-memory host document.

Only what the fake API touches is modeled: an element tree with ``id``
lookup, the ``loading`` ready state with its one-shot ready notification,
and the location fragment.
"""
from __future__ import annotations

from typing import Any, Callable, Iterator

from fake_ap.dom.location import Location

READY_STATES = ("loading", "interactive", "complete")


class Element:
    def __init__(self, tag: str) -> None:
        self.tag = tag.lower()
        self.attributes: dict[str, str] = {}
        self.children: list[Element] = []
        self.parent: Element | None = None
        #: Component currently rendered into this element by a rendering root.
        self.rendered: Any = None

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = str(value)

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: Element) -> Element:
        self.children.remove(child)
        child.parent = None
        return child

    def iter(self) -> Iterator[Element]:
        """Yield this element and its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter()

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, id={self.id!r})"


class Document:
    """Host document seen by the add-on iframe."""

    def __init__(self, ready_state: str = "complete", location: Location | None = None) -> None:
        if ready_state not in READY_STATES:
            raise ValueError(f"Unknown ready state {ready_state!r}")
        self.ready_state = ready_state
        self.location = location or Location()
        self.document_element = Element("html")
        self.body = self.document_element.append_child(Element("body"))
        self._ready_callbacks: list[Callable[[], Any]] = []

    @property
    def is_loading(self) -> bool:
        return self.ready_state == "loading"

    def create_element(self, tag: str) -> Element:
        return Element(tag)

    def get_element_by_id(self, element_id: str) -> Element | None:
        for element in self.document_element.iter():
            if element.id == element_id:
                return element
        return None

    def query_selector_all(self, selector: str) -> list[Element]:
        """Match ``#id`` or a bare tag name."""
        if selector.startswith("#"):
            wanted = selector[1:]
            return [e for e in self.document_element.iter() if e.id == wanted]
        tag = selector.lower()
        return [e for e in self.document_element.iter() if e.tag == tag]

    def on_ready(self, callback: Callable[[], Any]) -> None:
        """Run *callback* once when loading finishes (the ``DOMContentLoaded`` signal)."""
        self._ready_callbacks.append(callback)

    def finish_loading(self) -> None:
        """Leave the ``loading`` state and fire pending ready callbacks once."""
        if not self.is_loading:
            return
        self.ready_state = "interactive"
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            callback()


__all__ = ["Document", "Element", "READY_STATES"]
