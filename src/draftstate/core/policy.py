"""Draft policies.

A policy picks between the two draft behaviours:

- how unknown attributes are treated (strict errors vs. permissive warnings)
- where the overlay lives (shared per original vs. private per draft)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ForkScope(Enum):
    """Which object an overlay is associated with."""

    SHARED = auto()
    """One overlay per original, kept in the process-wide fork store.

    Only one live draft per original; a second draft_for() raises.
    """

    PRIVATE = auto()
    """Each draft owns its overlay. Independent drafts of one original may coexist."""


@dataclass(frozen=True, slots=True)
class DraftPolicy:
    """Behaviour switches for a draft, fixed at construction."""

    strict: bool = True
    """Raise DraftStateAccessError for attributes the original lacks."""

    fork_scope: ForkScope = ForkScope.SHARED
    """Where the overlay is kept."""

    warn_on_collision: bool = True
    """Warn at construction when the original has its own finalize."""

    warn_on_unknown_set: bool = True
    """Warn when a permissive draft writes an attribute the original lacks."""


STRICT = DraftPolicy()
PERMISSIVE = DraftPolicy(strict=False, fork_scope=ForkScope.PRIVATE)
