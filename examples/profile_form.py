"""Profile form example.

Demonstrates:
- Editing a draft from form input without touching the saved profile
- Binding input handlers to draft attributes
- Saving with finalize(draft), cancelling with discard()
"""

from collections.abc import Callable
from dataclasses import dataclass

from draftstate import Draft, changes, discard, draft_state_for, finalize


@dataclass
class UserInfo:
    name: str
    age: int


def bind(draft: Draft[UserInfo], field: str) -> Callable[[str], None]:
    """Return an input handler that writes the entered value to draft.field."""

    def on_input(value: str) -> None:
        setattr(draft, field, value)

    return on_input


class ProfileForm:
    """Edits a UserInfo through a draft until saved or cancelled."""

    def __init__(self, user: UserInfo) -> None:
        self.user = user
        self.draft = draft_state_for(user)
        self.update_name = bind(self.draft, "name")

    def update_age(self, value: str) -> None:
        self.draft.age = int(value)

    def save_changes(self) -> UserInfo:
        return finalize(self.draft)

    def cancel(self) -> None:
        discard(self.draft)
        self.draft = draft_state_for(self.user)
        self.update_name = bind(self.draft, "name")


def main() -> None:
    user = UserInfo(name="Chris", age=34)
    form = ProfileForm(user)

    form.update_name("Chris K.")
    form.update_age("35")
    print(f"Saved: {user}")
    print(f"Draft: name={form.draft.name!r} age={form.draft.age!r}")
    print(f"Pending: {changes(form.draft)}")

    form.save_changes()
    print(f"After save: {user}")

    form.update_name("Someone else")
    form.cancel()
    print(f"After cancel: {user}, draft name={form.draft.name!r}")


if __name__ == "__main__":
    main()
