"""Draft construction and the free-function operations on drafts.

The free functions work on any draft regardless of what attributes its
original defines, so ``finalize(draft)`` always merges even when
``draft.finalize`` is the original's own method.
"""

from __future__ import annotations

import warnings
from typing import Any, cast

from draftstate.core.errors import FinalizeCollisionWarning
from draftstate.core.policy import PERMISSIVE, STRICT, DraftPolicy, ForkScope
from draftstate.core.types import Draft
from draftstate.draft.state import FINALIZE, DraftState, merge, pending_writes
from draftstate.storage.fork_store import ForkStore, get_fork_store
from draftstate.storage.protocol import OverlayStore


def _store_for(policy: DraftPolicy) -> OverlayStore:
    if policy.fork_scope is ForkScope.SHARED:
        return get_fork_store()
    return ForkStore()


def _build[T](original: T, policy: DraftPolicy) -> Draft[T]:
    draft = DraftState(original, _store_for(policy), policy)
    if policy.warn_on_collision and draft._draft_collides:
        warnings.warn(
            f"{type(original).__name__} defines its own {FINALIZE!r}; draft.{FINALIZE}() will "
            f"call it instead of merging the draft. Use {FINALIZE}(draft) to merge.",
            FinalizeCollisionWarning,
            stacklevel=3,
        )
    return cast(Draft[T], draft)


def _require_draft(value: Any, operation: str) -> DraftState[Any]:
    if type(value) is not DraftState:
        raise TypeError(f"{operation}() expects a draft, got {type(value).__name__}")
    return value


def draft_state_for[T](original: T, policy: DraftPolicy = STRICT) -> Draft[T]:
    """Create a strict draft of original.

    By default the overlay is shared per original (one live draft at a time)
    and touching an attribute the original lacks raises.

    Args:
        original: Object to draft. Must not be None, a number, a sequence or a mapping.
        policy: Behaviour switches, STRICT unless given.

    Returns:
        A draft that reads and writes like original.

    Raises:
        DraftStateConstructorError: If original cannot be drafted, or (shared
            scope) already has a live draft.
    """
    return _build(original, policy)


def draft_for[T](original: T, policy: DraftPolicy = PERMISSIVE) -> Draft[T]:
    """Create a permissive draft of original.

    By default each draft owns a private overlay, so several drafts of one
    original can be edited independently. Writing an attribute the original
    lacks warns instead of raising.

    Args:
        original: Object to draft. Must not be None, a number, a sequence or a mapping.
        policy: Behaviour switches, PERMISSIVE unless given.

    Returns:
        A draft that reads and writes like original.

    Raises:
        DraftStateConstructorError: If original cannot be drafted.
    """
    return _build(original, policy)


def finalize[T](draft: Draft[T]) -> T:
    """Merge a draft's pending writes into its original.

    Assigns each pending value with setattr, so any change tracking on the
    original sees ordinary attribute writes. Merged writes are cleared from
    the draft; the draft stays usable afterwards. Once nothing is left
    pending the original can be drafted again, even while this draft lives.

    Args:
        draft: Draft returned by draft_for() or draft_state_for().

    Returns:
        The original object itself, not a copy.

    Raises:
        TypeError: If draft is not a draft.
        ForkMissingError: If the draft was discarded.
    """
    return merge(_require_draft(draft, "finalize"))


def changes(draft: Draft[Any]) -> dict[str, Any]:
    """Return a copy of the draft's pending writes, keyed by attribute name."""
    state = _require_draft(draft, "changes")
    return pending_writes(state)


def discard(draft: Draft[Any]) -> None:
    """Throw away a draft's pending writes and release its overlay.

    Afterwards the original can be drafted again in the shared scope, and any
    use of this draft raises ForkMissingError. Discarding twice is a no-op.
    """
    state = _require_draft(draft, "discard")
    state._draft_release()


def is_draft(value: Any) -> bool:
    """Check if value is a draft."""
    return type(value) is DraftState
