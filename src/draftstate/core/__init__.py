"""Core primitives: errors, policies and types.

Architecture Note:
    core/ is stateless. Overlay bookkeeping lives in storage/ and the
    attribute interception in draft/.
"""

from draftstate.core.errors import (
    DraftStateAccessError,
    DraftStateConstructorError,
    DraftStateWarning,
    FinalizeCollisionWarning,
    ForkMissingError,
    UnknownAttributeWarning,
)
from draftstate.core.policy import PERMISSIVE, STRICT, DraftPolicy, ForkScope
from draftstate.core.types import Draft

__all__ = [
    # Types
    "Draft",
    # Errors
    "DraftStateConstructorError",
    "DraftStateAccessError",
    "ForkMissingError",
    # Warnings
    "DraftStateWarning",
    "UnknownAttributeWarning",
    "FinalizeCollisionWarning",
    # Policy
    "DraftPolicy",
    "ForkScope",
    "STRICT",
    "PERMISSIVE",
]
