"""Tests for draft policies."""

import dataclasses

import pytest

from draftstate import PERMISSIVE, STRICT, DraftPolicy, ForkScope


def test_strict_is_the_default_policy() -> None:
    assert STRICT == DraftPolicy()
    assert STRICT.strict
    assert STRICT.fork_scope is ForkScope.SHARED
    assert STRICT.warn_on_collision
    assert STRICT.warn_on_unknown_set


def test_permissive_uses_private_overlays() -> None:
    assert not PERMISSIVE.strict
    assert PERMISSIVE.fork_scope is ForkScope.PRIVATE


def test_policy_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        STRICT.strict = False  # type: ignore[misc]


def test_policy_variants_via_replace() -> None:
    quiet = dataclasses.replace(PERMISSIVE, warn_on_unknown_set=False)

    assert not quiet.warn_on_unknown_set
    assert quiet.fork_scope is ForkScope.PRIVATE
    assert PERMISSIVE.warn_on_unknown_set
