"""Integration: finalize goes through the original's own assignment path."""

import threading
from types import SimpleNamespace

import pytest
from pydantic import BaseModel, ConfigDict, ValidationError

from draftstate import changes, draft_for, draft_state_for, finalize


class Observed:
    """Minimal change-tracking object: records every attribute assignment."""

    def __init__(self, **values: object) -> None:
        object.__setattr__(self, "notifications", [])
        for name, value in values.items():
            setattr(self, name, value)
        self.notifications.clear()

    def __setattr__(self, name: str, value: object) -> None:
        self.notifications.append((name, value))
        super().__setattr__(name, value)


class User(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str
    age: int


def test_draft_writes_do_not_notify() -> None:
    original = Observed(name="Chris", age=34)
    draft = draft_state_for(original)

    draft.name = "Kim"
    draft.age = 35

    assert original.notifications == []


def test_finalize_notifies_each_written_attribute_in_order() -> None:
    original = Observed(name="Chris", age=34)
    draft = draft_state_for(original)
    draft.age = 35
    draft.name = "Kim"

    finalize(draft)

    assert original.notifications == [("age", 35), ("name", "Kim")]


def test_pydantic_model_is_validated_on_finalize() -> None:
    user = User(name="Chris", age=34)
    draft = draft_state_for(user)
    draft.age = "35"

    finalize(draft)

    assert user.age == 35


def test_pydantic_rejection_keeps_pending_writes() -> None:
    user = User(name="Chris", age=34)
    draft = draft_state_for(user)
    draft.name = "Kim"
    draft.age = "not a number"

    with pytest.raises(ValidationError):
        finalize(draft)

    assert user.name == "Kim"
    assert user.age == 34
    assert changes(draft) == {"age": "not a number"}

    draft.age = 35
    finalize(draft)
    assert user.age == 35


@pytest.mark.parametrize("constructor", [draft_state_for, draft_for])
def test_concurrent_writers_last_write_wins(constructor) -> None:
    original = SimpleNamespace(counter=None)
    draft = constructor(original)
    rounds = 200
    start = threading.Barrier(8)

    def writer(worker: int) -> None:
        start.wait()
        for i in range(rounds):
            draft.counter = (worker, i)

    threads = [threading.Thread(target=writer, args=(worker,)) for worker in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    worker, i = draft.counter
    assert i == rounds - 1
    assert original.counter is None
    assert finalize(draft).counter == (worker, rounds - 1)


class Normalizing(Observed):
    """Observer that writes a stripped value back through a linked draft."""

    draft = None

    def __setattr__(self, name: str, value: object) -> None:
        super().__setattr__(name, value)
        if self.draft is not None and isinstance(value, str) and value != value.strip():
            setattr(self.draft, name, value.strip())


def test_observer_writing_back_during_finalize_is_kept() -> None:
    original = Normalizing(name="a")
    draft = draft_state_for(original)
    type(original).draft = draft
    try:
        draft.name = " b "

        finalize(draft)

        assert original.name == " b "
        assert changes(draft) == {"name": "b"}, "the observer's write stays pending"

        finalize(draft)
        assert original.name == "b"
        assert changes(draft) == {}
    finally:
        type(original).draft = None
