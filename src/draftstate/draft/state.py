"""DraftState: a copy-on-write view over an object.

Reads see pending writes first, then the original. Writes go to an overlay and
reach the original only when the draft is finalized.

Usage:
    draft = draft_state_for(user)
    draft.name = "Chris"         # user.name is unchanged
    assert draft.name == "Chris"
    draft.finalize()             # setattr(user, "name", "Chris")
"""

from __future__ import annotations

import warnings
import weakref
from collections.abc import Mapping, Sequence
from numbers import Number
from typing import Any

from draftstate.core.errors import (
    DraftStateAccessError,
    DraftStateConstructorError,
    ForkMissingError,
    UnknownAttributeWarning,
)
from draftstate.core.policy import DraftPolicy
from draftstate.storage.overlay import Overlay
from draftstate.storage.protocol import OverlayStore

FINALIZE = "finalize"

_SLOTS = (
    "_draft_original",
    "_draft_store",
    "_draft_policy",
    "_draft_collides",
    "_draft_overlay",
    "_draft_owner",
    "_draft_release",
)
_INTERNAL = frozenset(_SLOTS)
_UNSET = object()


def _internal(draft: DraftState[Any], name: str) -> Any:
    return object.__getattribute__(draft, name)


def check_draftable(original: Any) -> None:
    """Reject values that cannot carry a draft.

    Raises:
        DraftStateConstructorError: If original is None, a number, a
            sequence (str, bytes, list, tuple, ...) or a mapping, whose items
            are not attributes.
    """
    if original is None or isinstance(original, (Number, Sequence, Mapping)):
        raise DraftStateConstructorError(original)


class DraftState[T]:
    """Transparent read/write view over an original object plus its overlay.

    Attribute reads return the pending value if one was written, else the
    original's current value. Attribute writes are stored as pending.
    ``draft.finalize()`` merges the pending writes into the original, unless
    the original has its own ``finalize``, in which case that one is returned.

    Gotcha: special methods (``len(draft)``, ``draft == x``) are looked up on
    DraftState, not forwarded to the original.

    Args:
        original: Object to shadow.
        store: Store to register the overlay in.
        policy: Strictness and warning switches.
    """

    __slots__ = (*_SLOTS, "__weakref__")

    def __init__(self, original: T, store: OverlayStore, policy: DraftPolicy) -> None:
        check_draftable(original)
        # Read the original before registering, so a failing read leaves no overlay
        collides = hasattr(original, FINALIZE)
        owner = object()
        overlay = store.create(original, owner)
        object.__setattr__(self, "_draft_original", original)
        object.__setattr__(self, "_draft_store", store)
        object.__setattr__(self, "_draft_policy", policy)
        object.__setattr__(self, "_draft_collides", collides)
        object.__setattr__(self, "_draft_overlay", overlay)
        object.__setattr__(self, "_draft_owner", owner)
        # Drop the overlay with the draft; the callback must not hold the original
        release = weakref.finalize(self, store.release_key, id(original), owner)
        object.__setattr__(self, "_draft_release", release)

    def _overlay(self) -> Overlay | None:
        """Return the held overlay, or None while released after a full finalize."""
        original = _internal(self, "_draft_original")
        if not _internal(self, "_draft_release").alive:
            raise ForkMissingError(
                f"Draft of {type(original).__name__} was discarded; build a new one to keep editing"
            )
        overlay = _internal(self, "_draft_overlay")
        if overlay is None:
            return None
        try:
            registered = _internal(self, "_draft_store").get(original)
        except ForkMissingError:
            registered = None
        if registered is not overlay:
            # Released by a concurrent finalize that drained it
            if overlay.retired:
                return None
            raise ForkMissingError(
                f"Overlay of a {type(original).__name__} draft is owned by another draft"
            )
        return overlay

    def _claim(self) -> Overlay:
        """Return the held overlay, re-registering one if finalize released it."""
        overlay = _internal(self, "_overlay")()
        if overlay is None:
            overlay = _internal(self, "_draft_store").create(
                _internal(self, "_draft_original"), _internal(self, "_draft_owner")
            )
            object.__setattr__(self, "_draft_overlay", overlay)
        return overlay

    def _release_drained(self) -> None:
        _internal(self, "_draft_store").release_key(
            id(_internal(self, "_draft_original")), _internal(self, "_draft_owner")
        )
        object.__setattr__(self, "_draft_overlay", None)

    def _finalize(self) -> T:
        return merge(self)

    def __getattribute__(self, name: str) -> Any:
        if name in _INTERNAL:
            return object.__getattribute__(self, name)

        original = _internal(self, "_draft_original")
        if name == FINALIZE and not _internal(self, "_draft_collides"):
            return _internal(self, "_finalize")

        overlay: Overlay | None = _internal(self, "_overlay")()
        pending = _UNSET if overlay is None else overlay.get(name, _UNSET)
        current = getattr(original, name, _UNSET)
        if current is not _UNSET:
            return current if pending is _UNSET else pending

        if _internal(self, "_draft_policy").strict:
            raise DraftStateAccessError(name, original)

        # Permissive: pending unknown writes, then the wrapper's own members
        if pending is not _UNSET:
            return pending
        try:
            return object.__getattribute__(self, name)
        except AttributeError:
            raise DraftStateAccessError(name, original) from None

    def __setattr__(self, name: str, value: Any) -> None:
        original = _internal(self, "_draft_original")
        _internal(self, "_overlay")()

        if not hasattr(original, name):
            policy: DraftPolicy = _internal(self, "_draft_policy")
            if policy.strict:
                raise DraftStateAccessError(name, original)
            if policy.warn_on_unknown_set:
                warnings.warn(
                    f"Setting {name!r} on a draft of {type(original).__name__}, "
                    f"which has no such attribute; it will be added on finalize",
                    UnknownAttributeWarning,
                    stacklevel=2,
                )

        # A concurrent finalize may retire the overlay between claim and write
        while not _internal(self, "_claim")().write(name, value):
            pass

    def __delattr__(self, name: str) -> None:
        raise DraftStateAccessError(name, _internal(self, "_draft_original"))

    def __dir__(self) -> list[str]:
        return sorted(set(dir(_internal(self, "_draft_original"))) | {FINALIZE})

    def __repr__(self) -> str:
        original = _internal(self, "_draft_original")
        if not _internal(self, "_draft_release").alive:
            return f"<DraftState of {original!r} (discarded)>"
        pending = pending_writes(self)
        return f"<DraftState of {original!r} pending={pending!r}>"


def pending_writes(draft: DraftState[Any]) -> dict[str, Any]:
    """Copy of a draft's pending writes, read without going through interception."""
    overlay: Overlay | None = _internal(draft, "_overlay")()
    return {} if overlay is None else overlay.snapshot()


def merge[T](draft: DraftState[T]) -> T:
    """Copy the draft's pending writes onto its original and return the original.

    Once nothing is left pending, the draft gives up its overlay so the
    original can be drafted again; a later write through this draft claims a
    fresh one.
    """
    original = _internal(draft, "_draft_original")
    overlay: Overlay | None = _internal(draft, "_overlay")()
    if overlay is None:
        return original
    return overlay.merge_into(original, on_drained=_internal(draft, "_release_drained"))
