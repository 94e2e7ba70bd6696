"""Mount – process-wide registry of rendering roots keyed by container id."""

from __future__ import annotations

from typing import Any

from fake_ap.dom import Document, Element
from fake_ap.observability.logging import get_logger
from fake_ap.rendering import InMemoryRenderer, RenderingAdapter, Root, select_adapter

logger = get_logger(__name__)


class MountRegistry:
    """Keeps exactly one live root per container id.

    Re-mounting an id replaces its root but reuses the container element, so
    repeated mounts never duplicate an id in the document.

    Example::

        registry = MountRegistry(Document(), select_adapter(InMemoryRenderer()))
        registry.mount_when_ready(component, "ap_flags")
    """

    def __init__(self, document: Document, adapter: RenderingAdapter) -> None:
        self.document = document
        self.adapter = adapter
        self._roots: dict[str, Root] = {}

    def mount(self, component: Any, container_id: str) -> Root:
        if container_id in self._roots:
            self.unmount(container_id)

        container = self._container(container_id)
        root = self.adapter.create_root(container)
        self._roots[container_id] = root
        root.render(component)
        logger.debug("mount.created", container_id=container_id)
        return root

    def unmount(self, container_id: str) -> None:
        root = self._roots.pop(container_id, None)
        if root is None:
            return
        root.unmount()
        logger.debug("mount.released", container_id=container_id)

    def mount_when_ready(self, component: Any, container_id: str) -> None:
        """Mount now, or once the document finishes loading."""
        if self.document.is_loading:
            logger.debug("mount.deferred", container_id=container_id)
            self.document.on_ready(lambda: self.mount(component, container_id))
        else:
            self.mount(component, container_id)

    def root_for(self, container_id: str) -> Root | None:
        return self._roots.get(container_id)

    def mounted_ids(self) -> list[str]:
        return list(self._roots)

    def clear(self) -> None:
        """Unmount every recorded root."""
        for container_id in list(self._roots):
            self.unmount(container_id)

    def _container(self, container_id: str) -> Element:
        container = self.document.get_element_by_id(container_id)
        if container is None:
            container = self.document.create_element("div")
            container.set_attribute("id", container_id)
            self.document.body.append_child(container)
        return container

    def __contains__(self, container_id: str) -> bool:
        return container_id in self._roots


# ---------------------------------------------------------------------------
# Process-wide default registry
# ---------------------------------------------------------------------------

_default_registry: MountRegistry | None = None


def get_mount_registry() -> MountRegistry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = MountRegistry(Document(), select_adapter(InMemoryRenderer()))
    return _default_registry


def reset_mount_registry(
    document: Document | None = None,
    library: Any = None,
) -> MountRegistry:
    """Unmount everything and install a fresh process-wide registry.

    *library* is any modern or legacy rendering library; the in-memory
    modern one is used when omitted.
    """
    global _default_registry
    if _default_registry is not None:
        _default_registry.clear()
    _default_registry = MountRegistry(
        document or Document(),
        select_adapter(library if library is not None else InMemoryRenderer()),
    )
    return _default_registry


__all__ = ["MountRegistry", "get_mount_registry", "reset_mount_registry"]
