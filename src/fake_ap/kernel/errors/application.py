"""Application-layer errors raised by the emulated bridge API."""

from __future__ import annotations

from fake_ap.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """A bridge call could not be answered as requested."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
