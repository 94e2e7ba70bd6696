"""Rendering – in-memory view libraries, one per API generation."""
from __future__ import annotations

from typing import Any

from fake_ap.dom import Element


class InMemoryRoot:
    def __init__(self, container: Element) -> None:
        self.container = container
        self.unmounted = False

    def render(self, component: Any) -> None:
        self.container.rendered = component

    def unmount(self) -> None:
        if not self.unmounted:
            self.container.rendered = None
            self.unmounted = True


class InMemoryRenderer:
    """Modern root-based library: records the component on its container."""

    def __init__(self) -> None:
        self.roots: list[InMemoryRoot] = []

    def create_root(self, container: Element) -> InMemoryRoot:
        root = InMemoryRoot(container)
        self.roots.append(root)
        return root


class LegacyInMemoryRenderer:
    """Legacy container-based library with the same observable effect."""

    def __init__(self) -> None:
        self.mounted: list[Element] = []

    def render(self, component: Any, container: Element) -> None:
        container.rendered = component
        if container not in self.mounted:
            self.mounted.append(container)

    def unmount_component_at_node(self, container: Element) -> bool:
        if container not in self.mounted:
            return False
        container.rendered = None
        self.mounted.remove(container)
        return True


__all__ = ["InMemoryRenderer", "InMemoryRoot", "LegacyInMemoryRenderer"]
