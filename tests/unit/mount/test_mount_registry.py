"""Unit tests for the mount lifecycle manager."""

from __future__ import annotations

from fake_ap.dom import Document
from fake_ap.mount import MountRegistry, get_mount_registry, reset_mount_registry
from fake_ap.rendering import InMemoryRenderer, LegacyInMemoryRenderer, select_adapter


def _registry(ready_state: str = "complete", library=None) -> MountRegistry:
    return MountRegistry(Document(ready_state=ready_state), select_adapter(library or InMemoryRenderer()))


class TestMount:
    def test_creates_container_in_body(self) -> None:
        registry = _registry()
        registry.mount("component", "ap_flags")
        container = registry.document.get_element_by_id("ap_flags")
        assert container is not None
        assert container.tag == "div"
        assert container.parent is registry.document.body
        assert container.rendered == "component"
        assert "ap_flags" in registry

    def test_reuses_existing_element(self) -> None:
        registry = _registry()
        existing = registry.document.create_element("section")
        existing.set_attribute("id", "ap_flags")
        registry.document.body.append_child(existing)

        registry.mount("component", "ap_flags")

        assert registry.document.query_selector_all("#ap_flags") == [existing]
        assert existing.rendered == "component"

    def test_remount_replaces_root_without_duplicate_container(self) -> None:
        library = InMemoryRenderer()
        registry = _registry(library=library)
        first = registry.mount("first", "ap_dialogs")
        second = registry.mount("second", "ap_dialogs")

        assert first is not second
        assert first.unmounted
        assert registry.root_for("ap_dialogs") is second
        containers = registry.document.query_selector_all("#ap_dialogs")
        assert len(containers) == 1
        assert containers[0].rendered == "second"

    def test_legacy_library(self) -> None:
        library = LegacyInMemoryRenderer()
        registry = _registry(library=library)
        registry.mount("component", "ap_flags")
        container = registry.document.get_element_by_id("ap_flags")
        assert library.mounted == [container]
        registry.unmount("ap_flags")
        assert library.mounted == []


class TestUnmount:
    def test_releases_root(self) -> None:
        registry = _registry()
        root = registry.mount("component", "ap_flags")
        registry.unmount("ap_flags")
        assert root.unmounted
        assert registry.root_for("ap_flags") is None
        assert "ap_flags" not in registry

    def test_container_stays_in_document(self) -> None:
        registry = _registry()
        registry.mount("component", "ap_flags")
        registry.unmount("ap_flags")
        registry.mount("again", "ap_flags")
        assert len(registry.document.query_selector_all("#ap_flags")) == 1

    def test_unknown_id_is_noop(self) -> None:
        _registry().unmount("never-mounted")

    def test_clear(self) -> None:
        registry = _registry()
        registry.mount("a", "one")
        registry.mount("b", "two")
        registry.clear()
        assert registry.mounted_ids() == []


class TestMountWhenReady:
    def test_mounts_immediately_when_ready(self) -> None:
        registry = _registry()
        registry.mount_when_ready("component", "ap_flags")
        assert registry.mounted_ids() == ["ap_flags"]

    def test_defers_while_loading(self) -> None:
        registry = _registry(ready_state="loading")
        registry.mount_when_ready("component", "ap_flags")
        assert registry.mounted_ids() == []
        assert registry.document.get_element_by_id("ap_flags") is None

        registry.document.finish_loading()

        assert registry.mounted_ids() == ["ap_flags"]
        assert registry.document.get_element_by_id("ap_flags").rendered == "component"


class TestDefaultRegistry:
    def test_get_returns_same_instance(self) -> None:
        assert get_mount_registry() is get_mount_registry()

    def test_reset_installs_fresh_registry(self) -> None:
        old = get_mount_registry()
        old.mount("component", "ap_flags")
        old_root = old.root_for("ap_flags")

        new = reset_mount_registry()

        assert new is not old
        assert get_mount_registry() is new
        assert old_root.unmounted
        assert new.mounted_ids() == []

    def test_reset_with_legacy_library(self) -> None:
        registry = reset_mount_registry(library=LegacyInMemoryRenderer())
        assert isinstance(registry.adapter.library, LegacyInMemoryRenderer)

    def test_reset_with_document(self) -> None:
        document = Document(ready_state="loading")
        assert reset_mount_registry(document=document).document is document
        reset_mount_registry()
