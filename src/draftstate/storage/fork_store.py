"""Fork store: associates originals with their overlays.

Overlays are keyed by id(original). A draft holds its original strongly, so
the key cannot be reused while the association exists. The association is
released when the draft's writes are fully finalized, when the draft is
discarded, or when it is collected.

Usage:
    store = ForkStore()
    overlay = store.create(original)
    assert store.get(original) is overlay
    store.release(original)
"""

from __future__ import annotations

import threading
from typing import Any

from draftstate.core.errors import DraftStateConstructorError, ForkMissingError
from draftstate.storage.overlay import Overlay


class ForkStore:
    """Identity-keyed table of overlays.

    Structure:
        _forks[id(original)] = (owner, Overlay)

    The owner is an opaque token chosen by whoever created the entry. Releases
    that name an owner only drop that owner's entry, so a stale draft cannot
    evict the association of a newer draft of the same original.
    """

    def __init__(self) -> None:
        self._forks: dict[int, tuple[object | None, Overlay]] = {}
        self._lock = threading.Lock()

    def create(self, original: Any, owner: object | None = None) -> Overlay:
        """Allocate an empty overlay for original.

        Args:
            original: Object the overlay shadows.
            owner: Token identifying the holder of the association.

        Returns:
            The new overlay.

        Raises:
            DraftStateConstructorError: If original already has a live overlay here.
        """
        key = id(original)
        with self._lock:
            if key in self._forks:
                raise DraftStateConstructorError(
                    original,
                    reason="it already has a live draft; finalize or discard it first",
                )
            overlay = Overlay()
            self._forks[key] = (owner, overlay)
            return overlay

    def get(self, original: Any) -> Overlay:
        """Get the overlay associated with original.

        Raises:
            ForkMissingError: If original has no overlay in this store.
        """
        with self._lock:
            entry = self._forks.get(id(original))
        if entry is None:
            raise ForkMissingError(
                f"No overlay registered for {type(original).__name__} at {id(original):#x}: "
                f"the draft was discarded or not built with draft_for()/draft_state_for()"
            )
        return entry[1]

    def release(self, original: Any, owner: object | None = None) -> None:
        """Drop the overlay for original. No-op if there is none."""
        self.release_key(id(original), owner)

    def release_key(self, key: int, owner: object | None = None) -> None:
        """Drop the overlay stored under key. No-op if there is none.

        If owner is given, the entry is only dropped when it belongs to owner.
        Used from weakref finalizers, which must not hold the original.
        """
        with self._lock:
            entry = self._forks.get(key)
            if entry is None or (owner is not None and entry[0] is not owner):
                return
            del self._forks[key]

    def __contains__(self, original: Any) -> bool:
        with self._lock:
            return id(original) in self._forks

    def __len__(self) -> int:
        with self._lock:
            return len(self._forks)


# Module-level store used by ForkScope.SHARED drafts
_fork_store = ForkStore()


def get_fork_store() -> ForkStore:
    """Access the process-wide fork store.

    Returns:
        The ForkStore holding every SHARED-scope overlay.
    """
    return _fork_store
