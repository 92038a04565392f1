"""draftstate: copy-on-write drafts of mutable objects.

Usage:
    from draftstate import draft_state_for, finalize

    @dataclass
    class Profile:
        name: str
        age: int

    profile = Profile("Chris", 34)
    draft = draft_state_for(profile)
    draft.name = "Chris K."        # profile.name is still "Chris"
    assert draft.age == 34         # unwritten attributes read through
    assert finalize(draft) is profile
    assert profile.name == "Chris K."
"""

__version__ = "0.1.0"

# Core primitives
from draftstate.core import (
    PERMISSIVE,
    STRICT,
    Draft,
    DraftPolicy,
    DraftStateAccessError,
    DraftStateConstructorError,
    DraftStateWarning,
    FinalizeCollisionWarning,
    ForkMissingError,
    ForkScope,
    UnknownAttributeWarning,
)

# Drafts
from draftstate.draft import (
    DraftState,
    changes,
    discard,
    draft_for,
    draft_state_for,
    finalize,
    is_draft,
)

# Storage
from draftstate.storage import (
    ForkStore,
    Overlay,
    OverlayStore,
    get_fork_store,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Draft",
    "DraftPolicy",
    "ForkScope",
    "STRICT",
    "PERMISSIVE",
    "DraftStateConstructorError",
    "DraftStateAccessError",
    "ForkMissingError",
    "DraftStateWarning",
    "UnknownAttributeWarning",
    "FinalizeCollisionWarning",
    # Drafts
    "DraftState",
    "draft_state_for",
    "draft_for",
    "finalize",
    "changes",
    "discard",
    "is_draft",
    # Storage
    "Overlay",
    "OverlayStore",
    "ForkStore",
    "get_fork_store",
]
