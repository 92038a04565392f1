"""Overlay: the pending writes of one draft.

Usage:
    overlay = Overlay()
    overlay.write("name", "Chris")
    if "name" in overlay:
        value = overlay.get("name")
    overlay.merge_into(original)  # setattr(original, "name", "Chris")
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

_MISSING = object()


@dataclass(slots=True)
class Overlay:
    """Pending attribute writes shadowing an original object.

    A key is present iff it was written since the overlay was created or last
    merged. Every operation holds the overlay's lock, so concurrent writers
    resolve as last-write-wins.
    """

    entries: dict[str, Any] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)
    retired: bool = field(default=False, repr=False, compare=False)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self.entries

    def __len__(self) -> int:
        with self._lock:
            return len(self.entries)

    def is_empty(self) -> bool:
        """Check if there are no pending writes."""
        with self._lock:
            return not self.entries

    def get(self, key: str, default: Any = None) -> Any:
        """Return the pending value for key, or default if nothing was written."""
        with self._lock:
            return self.entries.get(key, default)

    def write(self, key: str, value: Any) -> bool:
        """Record value as the pending value for key, replacing any earlier one.

        Returns:
            False if the overlay was retired by a draining merge and took no
            write; the caller must claim a fresh overlay.
        """
        with self._lock:
            if self.retired:
                return False
            self.entries[key] = value
            return True

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the pending writes."""
        with self._lock:
            return dict(self.entries)

    def merge_into(
        self, original: Any, on_drained: Callable[[], None] | None = None
    ) -> Any:
        """Apply every pending write to original with setattr, in write order.

        Each entry is removed once its assignment succeeds, unless it was
        rewritten while being assigned (an observer on the original writing
        back through the draft); the newer value then stays pending. If the
        original rejects an assignment, the error propagates and the failing
        entry and all later ones stay pending. A retired overlay merges nothing.

        Args:
            original: Object to assign onto.
            on_drained: Called under the lock when no writes are left pending.
                The overlay is then retired and refuses further writes.

        Returns:
            The same original object.
        """
        with self._lock:
            if self.retired:
                return original
            for key, value in list(self.entries.items()):
                setattr(original, key, value)
                if self.entries.get(key, _MISSING) is value:
                    del self.entries[key]
            if on_drained is not None and not self.entries:
                self.retired = True
                on_drained()
        return original
