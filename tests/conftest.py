"""Shared pytest configuration for the fake-ap test-suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from importlib.metadata import entry_points

import pytest
import structlog

# An installed distribution registers the fixtures through its ``pytest11``
# entry point; registering the same module twice is an error.
if not any(ep.value == "fake_ap.testing.fixtures" for ep in entry_points(group="pytest11")):
    pytest_plugins = ["fake_ap.testing.fixtures"]


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo ``configure_logging``: structlog defaults, root handlers and level."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
