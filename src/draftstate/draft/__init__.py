"""Drafts: copy-on-write views over objects, and the operations on them.

Architecture Note:
    draft/ intercepts attribute access and routes it through the overlays
    kept in storage/. It never mutates an original outside finalize().
"""

from draftstate.draft.operations import (
    changes,
    discard,
    draft_for,
    draft_state_for,
    finalize,
    is_draft,
)
from draftstate.draft.state import DraftState

__all__ = [
    "DraftState",
    "draft_state_for",
    "draft_for",
    "finalize",
    "changes",
    "discard",
    "is_draft",
]
