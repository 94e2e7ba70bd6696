"""Surfaces – auxiliary UI mounted next to the add-on (flags, dialogs)."""
from fake_ap.surfaces.dialogs import DIALOGS_CONTAINER_ID, Dialog, DialogsSurface
from fake_ap.surfaces.flags import FLAGS_CONTAINER_ID, Flag, FlagsSurface

__all__ = [
    "DIALOGS_CONTAINER_ID",
    "Dialog",
    "DialogsSurface",
    "FLAGS_CONTAINER_ID",
    "Flag",
    "FlagsSurface",
]
