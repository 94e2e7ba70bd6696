"""DOM – navigable location with a fragment identifier."""
from __future__ import annotations


class Location:
    """The fragment part of the host page location.

    Assignment follows browser behavior: an empty value clears the fragment,
    anything else is stored with a single leading ``#``.
    """

    def __init__(self, hash: str = "") -> None:  # noqa: A002
        self._hash = ""
        self.hash = hash

    @property
    def hash(self) -> str:
        return self._hash

    @hash.setter
    def hash(self, value: str) -> None:
        fragment = value[1:] if value.startswith("#") else value
        self._hash = f"#{fragment}" if fragment else ""

    def __repr__(self) -> str:
        return f"Location(hash={self._hash!r})"


__all__ = ["Location"]
