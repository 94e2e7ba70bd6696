"""Rendering – one adapter interface over modern and legacy view libraries.

A *modern* library exposes ``create_root(container)`` returning a root with
``render(component)`` and ``unmount()``. A *legacy* library renders straight
into a container with ``render(component, container)`` and tears down with
``unmount_component_at_node(container)``. :func:`select_adapter` probes the
library once; call sites only see :class:`RenderingAdapter`.
"""
from __future__ import annotations

import abc
from typing import Any, Protocol

from fake_ap.dom import Element


class Root(Protocol):
    """Port: a rendering root bound to one container element."""

    def render(self, component: Any) -> None: ...
    def unmount(self) -> None: ...


class RenderingAdapter(abc.ABC):
    def __init__(self, library: Any) -> None:
        self.library = library

    @abc.abstractmethod
    def create_root(self, container: Element) -> Root: ...


class ModernRenderingAdapter(RenderingAdapter):
    """Delegates to the library's own ``create_root``."""

    def create_root(self, container: Element) -> Root:
        return self.library.create_root(container)


class _LegacyRoot:
    def __init__(self, library: Any, container: Element) -> None:
        self._library = library
        self._container = container

    def render(self, component: Any) -> None:
        self._library.render(component, self._container)

    def unmount(self) -> None:
        self._library.unmount_component_at_node(self._container)


class LegacyRenderingAdapter(RenderingAdapter):
    """Wraps container-level ``render`` / ``unmount_component_at_node`` in a root."""

    def create_root(self, container: Element) -> Root:
        return _LegacyRoot(self.library, container)


def select_adapter(library: Any) -> RenderingAdapter:
    """Pick the adapter matching the capabilities *library* exposes."""
    if callable(getattr(library, "create_root", None)):
        return ModernRenderingAdapter(library)
    if callable(getattr(library, "render", None)) and callable(
        getattr(library, "unmount_component_at_node", None)
    ):
        return LegacyRenderingAdapter(library)
    raise TypeError(
        f"{type(library).__name__} exposes neither create_root() nor "
        "render()/unmount_component_at_node()"
    )


__all__ = [
    "LegacyRenderingAdapter",
    "ModernRenderingAdapter",
    "RenderingAdapter",
    "Root",
    "select_adapter",
]
