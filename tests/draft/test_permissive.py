"""Tests for permissive drafts from draft_for()."""

import warnings
from types import SimpleNamespace

import pytest

from draftstate import (
    PERMISSIVE,
    DraftPolicy,
    DraftStateAccessError,
    UnknownAttributeWarning,
    changes,
    draft_for,
    finalize,
)


def test_unknown_write_warns_and_is_kept() -> None:
    original = SimpleNamespace(data="hello")
    draft = draft_for(original)

    with pytest.warns(UnknownAttributeWarning, match="'nickname'"):
        draft.nickname = "CK"

    assert draft.nickname == "CK"
    assert not hasattr(original, "nickname")
    assert changes(draft) == {"nickname": "CK"}


def test_unknown_write_is_added_on_finalize() -> None:
    original = SimpleNamespace(data="hello")
    draft = draft_for(original)
    with pytest.warns(UnknownAttributeWarning):
        draft.nickname = "CK"

    finalize(draft)

    assert original.nickname == "CK"


def test_unknown_write_warning_can_be_disabled() -> None:
    policy = DraftPolicy(strict=False, fork_scope=PERMISSIVE.fork_scope, warn_on_unknown_set=False)
    draft = draft_for(SimpleNamespace(), policy=policy)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        draft.anything = 1

    assert draft.anything == 1


def test_known_write_does_not_warn() -> None:
    draft = draft_for(SimpleNamespace(data="hello"))

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        draft.data = "goodbye"

    assert draft.data == "goodbye"


def test_unknown_read_without_pending_write_raises() -> None:
    draft = draft_for(SimpleNamespace(data="hello"))

    with pytest.raises(DraftStateAccessError, match="'missing'"):
        _ = draft.missing
    assert not hasattr(draft, "missing")


def test_finalize_accessor_is_reachable() -> None:
    original = SimpleNamespace(data="hello")
    draft = draft_for(original)
    draft.data = "goodbye"

    assert draft.finalize() is original
    assert original.data == "goodbye"
    assert draft.data == "goodbye", "the draft value matches the new value as well"
