"""Exceptions and warning categories raised by drafts."""

from __future__ import annotations

from typing import Any


class DraftStateConstructorError(TypeError):
    """Raised when a draft cannot be built for the given object."""

    def __init__(self, bad_arg: Any, reason: str | None = None) -> None:
        self.bad_arg = bad_arg
        detail = reason or f"expected an object with attributes, got {type(bad_arg).__name__}"
        super().__init__(f"Cannot construct a draft for {bad_arg!r}: {detail}")


class DraftStateAccessError(AttributeError):
    """Raised when a strict draft is asked for an attribute its original lacks."""

    def __init__(self, bad_key: str, target: Any) -> None:
        self.bad_key = bad_key
        self.target = target
        super().__init__(f"Cannot access {bad_key!r} on {target!r}: no such attribute")


class ForkMissingError(RuntimeError):
    """Raised when no overlay is registered for a draft's original.

    Drafts built through draft_state_for() or draft_for() always register one,
    so this means the draft was discarded or built some other way.
    """

    pass


class DraftStateWarning(UserWarning):
    """Base category for non-fatal draft diagnostics."""

    pass


class UnknownAttributeWarning(DraftStateWarning):
    """A permissive draft wrote an attribute its original does not have."""

    pass


class FinalizeCollisionWarning(DraftStateWarning):
    """The original defines its own finalize, hiding draft.finalize()."""

    pass
