"""Rendering – adapter interface and in-memory view libraries."""
from fake_ap.rendering.adapter import (
    LegacyRenderingAdapter,
    ModernRenderingAdapter,
    RenderingAdapter,
    Root,
    select_adapter,
)
from fake_ap.rendering.memory import InMemoryRenderer, InMemoryRoot, LegacyInMemoryRenderer

__all__ = [
    "InMemoryRenderer",
    "InMemoryRoot",
    "LegacyInMemoryRenderer",
    "LegacyRenderingAdapter",
    "ModernRenderingAdapter",
    "RenderingAdapter",
    "Root",
    "select_adapter",
]
