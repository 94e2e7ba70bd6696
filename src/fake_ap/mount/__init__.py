"""Mount – lazy, idempotent mounting of named containers."""
from fake_ap.mount.registry import MountRegistry, get_mount_registry, reset_mount_registry

__all__ = ["MountRegistry", "get_mount_registry", "reset_mount_registry"]
