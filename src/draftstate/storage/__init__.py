"""Overlay storage: the bookkeeping behind drafts."""

from draftstate.storage.fork_store import ForkStore, get_fork_store
from draftstate.storage.overlay import Overlay
from draftstate.storage.protocol import OverlayStore

__all__ = [
    "Overlay",
    "OverlayStore",
    "ForkStore",
    "get_fork_store",
]
