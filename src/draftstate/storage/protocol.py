"""Overlay store protocol.

Both fork scopes go through this interface:
- SHARED: the process-wide store from get_fork_store()
- PRIVATE: a ForkStore owned by a single draft
"""

from __future__ import annotations

from typing import Any, Protocol

from draftstate.storage.overlay import Overlay


class OverlayStore(Protocol):
    """Keeps one overlay per original object."""

    def create(self, original: Any, owner: object | None = None) -> Overlay:
        """Register a fresh overlay for original."""
        ...

    def get(self, original: Any) -> Overlay:
        """Get the overlay registered for original."""
        ...

    def release(self, original: Any, owner: object | None = None) -> None:
        """Forget the overlay for original, if any."""
        ...

    def release_key(self, key: int, owner: object | None = None) -> None:
        """Forget the overlay stored under an identity key, if owner holds it."""
        ...

    def __contains__(self, original: Any) -> bool:
        """Check if original has a registered overlay."""
        ...
